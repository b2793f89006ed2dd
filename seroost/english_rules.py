"""Shared data and the early rules of the English stemmer.

Covers the prelude, region marking and step 1 of the algorithm.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from seroost.snowball_env import Among, SnowballEnv

# Groupings: bitmaps over code points, least significant bit first.
V = (17, 65, 16, 1)
V_WXY = (1, 17, 65, 208, 1)
VALID_LI = (55, 141, 2)

_PREFIXES = (
    Among("arsen", -1, -1),
    Among("commun", -1, -1),
    Among("gener", -1, -1),
)

_APOSTROPHE_SUFFIXES = (
    Among("'", -1, 1),
    Among("'s'", 0, 1),
    Among("'s", -1, 1),
)

_PLURAL_SUFFIXES = (
    Among("ied", -1, 2),
    Among("s", -1, 3),
    Among("ies", 1, 2),
    Among("sses", 1, 1),
    Among("ss", 1, -1),
    Among("us", 1, -1),
)

_STEM_ENDINGS = (
    Among("", -1, 3),
    Among("bb", 0, 2),
    Among("dd", 0, 2),
    Among("ff", 0, 2),
    Among("gg", 0, 2),
    Among("bl", 0, 1),
    Among("mm", 0, 2),
    Among("nn", 0, 2),
    Among("pp", 0, 2),
    Among("rr", 0, 2),
    Among("at", 0, 1),
    Among("tt", 0, 2),
    Among("iz", 0, 1),
)

_ED_ING_SUFFIXES = (
    Among("ed", -1, 2),
    Among("eed", 0, 1),
    Among("ing", -1, 2),
    Among("edly", -1, 2),
    Among("eedly", 3, 1),
    Among("ingly", -1, 2),
)


@dataclass
class StemContext:
    """Per-word state shared between the stemming rules."""

    y_found: bool = False
    p1: int = 0
    p2: int = 0


def _go_past(env: SnowballEnv, test: Callable[[], bool]) -> bool:
    """Advance until ``test`` succeeds; False if the limit is reached first."""
    while True:
        if test():
            return True
        if env.cursor >= env.limit:
            return False
        env.next_char()


def _go_past_back(env: SnowballEnv, test: Callable[[], bool]) -> bool:
    """Step backwards until ``test`` succeeds; False at the backward limit."""
    while True:
        if test():
            return True
        if env.cursor <= env.limit_backward:
            return False
        env.previous_char()


def _vowel(env: SnowballEnv) -> bool:
    return env.in_grouping(V, 97, 121)


def _non_vowel(env: SnowballEnv) -> bool:
    return env.out_grouping(V, 97, 121)


def _find_y_after_vowel(env: SnowballEnv) -> bool:
    """Mark the next ``y`` that follows a vowel; the cursor stays before the vowel."""
    while True:
        start = env.cursor
        if env.in_grouping(V, 97, 121):
            env.bra = env.cursor
            if env.eq_s("y"):
                env.ket = env.cursor
                env.cursor = start
                return True
        env.cursor = start
        if env.cursor >= env.limit:
            return False
        env.next_char()


def prelude(env: SnowballEnv, context: StemContext) -> bool:
    """Drop a leading apostrophe and mark consonant ``y`` as ``Y``."""
    context.y_found = False

    start = env.cursor
    env.bra = env.cursor
    if env.eq_s("'"):
        env.ket = env.cursor
        env.slice_del()
    env.cursor = start

    start = env.cursor
    env.bra = env.cursor
    if env.eq_s("y"):
        env.ket = env.cursor
        env.slice_from("Y")
        context.y_found = True
    env.cursor = start

    start = env.cursor
    while True:
        position = env.cursor
        if not _find_y_after_vowel(env):
            env.cursor = position
            break
        env.slice_from("Y")
        context.y_found = True
    env.cursor = start
    return True


def _mark(env: SnowballEnv, context: StemContext) -> bool:
    start = env.cursor
    if env.find_among(_PREFIXES, context) == 0:
        env.cursor = start
        if not _go_past(env, lambda: _vowel(env)):
            return False
        if not _go_past(env, lambda: _non_vowel(env)):
            return False
    context.p1 = env.cursor
    if not _go_past(env, lambda: _vowel(env)):
        return False
    if not _go_past(env, lambda: _non_vowel(env)):
        return False
    context.p2 = env.cursor
    return True


def mark_regions(env: SnowballEnv, context: StemContext) -> bool:
    """Set the R1 and R2 region starts in ``context``."""
    context.p1 = env.limit
    context.p2 = env.limit
    start = env.cursor
    _mark(env, context)
    env.cursor = start
    return True


def shortv(env: SnowballEnv, context: StemContext) -> bool:
    """Whether the text before the cursor ends in a short syllable."""
    saved = env.limit - env.cursor
    if (
        env.out_grouping_b(V_WXY, 89, 121)
        and env.in_grouping_b(V, 97, 121)
        and env.out_grouping_b(V, 97, 121)
    ):
        return True
    env.cursor = env.limit - saved
    if not env.out_grouping_b(V, 97, 121):
        return False
    if not env.in_grouping_b(V, 97, 121):
        return False
    return env.cursor <= env.limit_backward


def r1(env: SnowballEnv, context: StemContext) -> bool:
    """Whether the cursor lies within region R1."""
    return context.p1 <= env.cursor


def r2(env: SnowballEnv, context: StemContext) -> bool:
    """Whether the cursor lies within region R2."""
    return context.p2 <= env.cursor


def step_1a(env: SnowballEnv, context: StemContext) -> bool:
    """Remove possessive endings and reduce plural suffixes."""
    saved = env.limit - env.cursor
    env.ket = env.cursor
    if env.find_among_b(_APOSTROPHE_SUFFIXES, context) == 0:
        env.cursor = env.limit - saved
    else:
        env.bra = env.cursor
        env.slice_del()

    env.ket = env.cursor
    among_var = env.find_among_b(_PLURAL_SUFFIXES, context)
    if among_var == 0:
        return False
    env.bra = env.cursor
    if among_var == 1:
        env.slice_from("ss")
    elif among_var == 2:
        saved = env.limit - env.cursor
        if env.hop_back(2):
            env.slice_from("i")
        else:
            env.cursor = env.limit - saved
            env.slice_from("ie")
    elif among_var == 3:
        if env.cursor <= env.limit_backward:
            return False
        env.previous_char()
        if not _go_past_back(env, lambda: env.in_grouping_b(V, 97, 121)):
            return False
        env.slice_del()
    return True


def step_1b(env: SnowballEnv, context: StemContext) -> bool:
    """Handle ``eed``, ``ed`` and ``ing`` style endings."""
    env.ket = env.cursor
    among_var = env.find_among_b(_ED_ING_SUFFIXES, context)
    if among_var == 0:
        return False
    env.bra = env.cursor
    if among_var == 1:
        if not r1(env, context):
            return False
        env.slice_from("ee")
    elif among_var == 2:
        saved = env.limit - env.cursor
        if not _go_past_back(env, lambda: env.in_grouping_b(V, 97, 121)):
            return False
        env.cursor = env.limit - saved
        env.slice_del()

        saved = env.limit - env.cursor
        among_var = env.find_among_b(_STEM_ENDINGS, context)
        if among_var == 0:
            return False
        env.cursor = env.limit - saved
        if among_var == 1:
            position = env.cursor
            env.insert(position, position, "e")
            env.cursor = position
        elif among_var == 2:
            env.ket = env.cursor
            if env.cursor <= env.limit_backward:
                return False
            env.previous_char()
            env.bra = env.cursor
            env.slice_del()
        elif among_var == 3:
            if env.cursor != context.p1:
                return False
            saved = env.limit - env.cursor
            if not shortv(env, context):
                return False
            env.cursor = env.limit - saved
            position = env.cursor
            env.insert(position, position, "e")
            env.cursor = position
    return True


def step_1c(env: SnowballEnv, context: StemContext) -> bool:
    """Turn a final ``y`` after a non-initial consonant into ``i``."""
    env.ket = env.cursor
    saved = env.limit - env.cursor
    if not env.eq_s_b("y"):
        env.cursor = env.limit - saved
        if not env.eq_s_b("Y"):
            return False
    env.bra = env.cursor
    if not env.out_grouping_b(V, 97, 121):
        return False
    if env.cursor <= env.limit_backward:
        return False
    env.slice_from("i")
    return True