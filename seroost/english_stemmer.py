"""Later rules of the English stemmer and the stemming entry points."""

from __future__ import annotations

from seroost.english_rules import (
    VALID_LI,
    StemContext,
    mark_regions,
    prelude,
    r1,
    r2,
    shortv,
    step_1a,
    step_1b,
    step_1c,
)
from seroost.snowball_env import Among, SnowballEnv

_STEP2_SUFFIXES = (
    Among("anci", -1, 3),
    Among("enci", -1, 2),
    Among("ogi", -1, 13),
    Among("li", -1, 15),
    Among("bli", 3, 12),
    Among("abli", 4, 4),
    Among("alli", 3, 8),
    Among("fulli", 3, 9),
    Among("lessli", 3, 14),
    Among("ousli", 3, 10),
    Among("entli", 3, 5),
    Among("aliti", -1, 8),
    Among("biliti", -1, 12),
    Among("iviti", -1, 11),
    Among("tional", -1, 1),
    Among("ational", 14, 7),
    Among("alism", -1, 8),
    Among("ation", -1, 7),
    Among("ization", 17, 6),
    Among("izer", -1, 6),
    Among("ator", -1, 7),
    Among("iveness", -1, 11),
    Among("fulness", -1, 9),
    Among("ousness", -1, 10),
)

_STEP2_REPLACEMENTS = {
    1: "tion",
    2: "ence",
    3: "ance",
    4: "able",
    5: "ent",
    6: "ize",
    7: "ate",
    8: "al",
    9: "ful",
    10: "ous",
    11: "ive",
    12: "ble",
    14: "less",
}

_STEP3_SUFFIXES = (
    Among("icate", -1, 4),
    Among("ative", -1, 6),
    Among("alize", -1, 3),
    Among("iciti", -1, 4),
    Among("ical", -1, 4),
    Among("tional", -1, 1),
    Among("ational", 5, 2),
    Among("ful", -1, 5),
    Among("ness", -1, 5),
)

_STEP3_REPLACEMENTS = {
    1: "tion",
    2: "ate",
    3: "al",
    4: "ic",
}

_STEP4_SUFFIXES = (
    Among("ic", -1, 1),
    Among("ance", -1, 1),
    Among("ence", -1, 1),
    Among("able", -1, 1),
    Among("ible", -1, 1),
    Among("ate", -1, 1),
    Among("ive", -1, 1),
    Among("ize", -1, 1),
    Among("iti", -1, 1),
    Among("al", -1, 1),
    Among("ism", -1, 1),
    Among("ion", -1, 2),
    Among("er", -1, 1),
    Among("ous", -1, 1),
    Among("ant", -1, 1),
    Among("ent", -1, 1),
    Among("ment", 15, 1),
    Among("ement", 16, 1),
)

_STEP5_SUFFIXES = (
    Among("e", -1, 1),
    Among("l", -1, 2),
)

_INVARIANT_WORDS = (
    Among("succeed", -1, -1),
    Among("proceed", -1, -1),
    Among("exceed", -1, -1),
    Among("canning", -1, -1),
    Among("inning", -1, -1),
    Among("earring", -1, -1),
    Among("herring", -1, -1),
    Among("outing", -1, -1),
)

_SPECIAL_WORDS = (
    Among("andes", -1, -1),
    Among("atlas", -1, -1),
    Among("bias", -1, -1),
    Among("cosmos", -1, -1),
    Among("dying", -1, 3),
    Among("early", -1, 9),
    Among("gently", -1, 7),
    Among("howe", -1, -1),
    Among("idly", -1, 6),
    Among("lying", -1, 4),
    Among("news", -1, -1),
    Among("only", -1, 10),
    Among("singly", -1, 11),
    Among("skies", -1, 2),
    Among("skis", -1, 1),
    Among("sky", -1, -1),
    Among("tying", -1, 5),
    Among("ugly", -1, 8),
)

_SPECIAL_REPLACEMENTS = {
    1: "ski",
    2: "sky",
    3: "die",
    4: "lie",
    5: "tie",
    6: "idl",
    7: "gentl",
    8: "ugli",
    9: "earli",
    10: "onli",
    11: "singl",
}


def step_2(env: SnowballEnv, context: StemContext) -> bool:
    """Normalise derivational suffixes found in R1."""
    env.ket = env.cursor
    among_var = env.find_among_b(_STEP2_SUFFIXES, context)
    if among_var == 0:
        return False
    env.bra = env.cursor
    if not r1(env, context):
        return False
    if among_var in _STEP2_REPLACEMENTS:
        env.slice_from(_STEP2_REPLACEMENTS[among_var])
    elif among_var == 13:
        if not env.eq_s_b("l"):
            return False
        env.slice_from("og")
    elif among_var == 15:
        if not env.in_grouping_b(VALID_LI, 99, 116):
            return False
        env.slice_del()
    return True


def step_3(env: SnowballEnv, context: StemContext) -> bool:
    """Reduce or remove further suffixes found in R1."""
    env.ket = env.cursor
    among_var = env.find_among_b(_STEP3_SUFFIXES, context)
    if among_var == 0:
        return False
    env.bra = env.cursor
    if not r1(env, context):
        return False
    if among_var in _STEP3_REPLACEMENTS:
        env.slice_from(_STEP3_REPLACEMENTS[among_var])
    elif among_var == 5:
        env.slice_del()
    elif among_var == 6:
        if not r2(env, context):
            return False
        env.slice_del()
    return True


def step_4(env: SnowballEnv, context: StemContext) -> bool:
    """Delete suffixes found in R2."""
    env.ket = env.cursor
    among_var = env.find_among_b(_STEP4_SUFFIXES, context)
    if among_var == 0:
        return False
    env.bra = env.cursor
    if not r2(env, context):
        return False
    if among_var == 1:
        env.slice_del()
    elif among_var == 2:
        saved = env.limit - env.cursor
        if not env.eq_s_b("s"):
            env.cursor = env.limit - saved
            if not env.eq_s_b("t"):
                return False
        env.slice_del()
    return True


def step_5(env: SnowballEnv, context: StemContext) -> bool:
    """Remove a final ``e`` or the second ``l`` of a final ``ll``."""
    env.ket = env.cursor
    among_var = env.find_among_b(_STEP5_SUFFIXES, context)
    if among_var == 0:
        return False
    env.bra = env.cursor
    if among_var == 1:
        saved = env.limit - env.cursor
        if not r2(env, context):
            env.cursor = env.limit - saved
            if not r1(env, context):
                return False
            saved = env.limit - env.cursor
            if shortv(env, context):
                return False
            env.cursor = env.limit - saved
        env.slice_del()
    elif among_var == 2:
        if not r2(env, context):
            return False
        if not env.eq_s_b("l"):
            return False
        env.slice_del()
    return True


def exception2(env: SnowballEnv, context: StemContext) -> bool:
    """Whether the whole word is one left unchanged after step 1a."""
    env.ket = env.cursor
    if env.find_among_b(_INVARIANT_WORDS, context) == 0:
        return False
    env.bra = env.cursor
    return env.cursor <= env.limit_backward


def exception1(env: SnowballEnv, context: StemContext) -> bool:
    """Handle whole words with irregular stems."""
    env.bra = env.cursor
    among_var = env.find_among(_SPECIAL_WORDS, context)
    if among_var == 0:
        return False
    env.ket = env.cursor
    if env.cursor < env.limit:
        return False
    replacement = _SPECIAL_REPLACEMENTS.get(among_var)
    if replacement is not None:
        env.slice_from(replacement)
    return True


def _mark_next_y(env: SnowballEnv) -> bool:
    """Mark the next ``Y``; the cursor is left just before it."""
    while True:
        start = env.cursor
        env.bra = env.cursor
        if env.eq_s("Y"):
            env.ket = env.cursor
            env.cursor = start
            return True
        env.cursor = start
        if env.cursor >= env.limit:
            return False
        env.next_char()


def postlude(env: SnowballEnv, context: StemContext) -> bool:
    """Turn every ``Y`` marked by the prelude back into ``y``."""
    if not context.y_found:
        return False
    while True:
        position = env.cursor
        if not _mark_next_y(env):
            env.cursor = position
            break
        env.slice_from("y")
    return True


def stem_env(env: SnowballEnv) -> bool:
    """Stem the text held by ``env`` in place."""
    context = StemContext()
    start = env.cursor
    if exception1(env, context):
        return True
    env.cursor = start
    if not env.hop(3):
        env.cursor = start
        return True
    env.cursor = start

    prelude(env, context)
    mark_regions(env, context)
    env.limit_backward = env.cursor
    env.cursor = env.limit

    saved = env.limit - env.cursor
    step_1a(env, context)
    env.cursor = env.limit - saved

    saved = env.limit - env.cursor
    if not exception2(env, context):
        env.cursor = env.limit - saved
        for step in (step_1b, step_1c, step_2, step_3, step_4, step_5):
            saved = env.limit - env.cursor
            step(env, context)
            env.cursor = env.limit - saved

    env.cursor = env.limit_backward
    start = env.cursor
    postlude(env, context)
    env.cursor = start
    return True


def stem(word: str) -> str:
    """Return the English stem of ``word``."""
    env = SnowballEnv(word)
    stem_env(env)
    return env.current