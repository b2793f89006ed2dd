import pytest

from seroost.english_rules import StemContext
from seroost.english_stemmer import (
    exception1,
    exception2,
    postlude,
    stem,
    stem_env,
    step_2,
    step_3,
    step_4,
    step_5,
)
from seroost.snowball_env import SnowballEnv


@pytest.mark.parametrize(
    "word, expected",
    [
        ("skis", "ski"),
        ("skies", "sky"),
        ("dying", "die"),
        ("lying", "lie"),
        ("tying", "tie"),
        ("idly", "idl"),
        ("gently", "gentl"),
        ("ugly", "ugli"),
        ("early", "earli"),
        ("only", "onli"),
        ("singly", "singl"),
    ],
)
def test_special_words(word, expected):
    assert stem(word) == expected


@pytest.mark.parametrize(
    "word", ["andes", "atlas", "bias", "cosmos", "howe", "news", "sky"]
)
def test_invariant_special_words(word):
    assert stem(word) == word


@pytest.mark.parametrize(
    "word",
    ["succeed", "proceed", "exceed", "canning", "inning", "earring", "herring", "outing"],
)
def test_words_kept_after_step_1a(word):
    assert stem(word) == word


@pytest.mark.parametrize("word", ["", "a", "at", "by"])
def test_short_words_unchanged(word):
    assert stem(word) == word


def test_common_words():
    assert stem("running") == "run"
    assert stem("caresses") == "caress"
    assert stem("ponies") == "poni"


def test_stem_env_keeps_limit_consistent():
    env = SnowballEnv("running")
    assert stem_env(env) is True
    assert env.limit == len(env.current)


def test_exception1_replaces_whole_word():
    env = SnowballEnv("skies")
    assert exception1(env, StemContext()) is True
    assert env.current == "sky"


def test_exception1_requires_whole_word():
    env = SnowballEnv("skiesx")
    assert exception1(env, StemContext()) is False
    assert env.current == "skiesx"


def test_exception2_matches_whole_word_only():
    env = SnowballEnv("succeed")
    env.cursor = env.limit
    assert exception2(env, StemContext()) is True

    env = SnowballEnv("xsucceed")
    env.cursor = env.limit
    assert exception2(env, StemContext()) is False


def test_postlude_requires_y_found():
    env = SnowballEnv("YaY")
    assert postlude(env, StemContext(y_found=False)) is False
    assert env.current == "YaY"


def test_postlude_restores_lowercase_y():
    env = SnowballEnv("YaY")
    assert postlude(env, StemContext(y_found=True)) is True
    assert env.current == "yay"


@pytest.mark.parametrize("step", [step_2, step_3, step_4, step_5])
def test_steps_outside_regions_do_nothing(step):
    word = "relational"
    env = SnowballEnv(word)
    env.cursor = env.limit
    context = StemContext(p1=env.limit, p2=env.limit)
    step(env, context)
    assert env.current == word


@pytest.mark.parametrize("step", [step_2, step_3, step_4, step_5])
def test_steps_without_suffix_fail(step):
    env = SnowballEnv("xyz")
    env.cursor = env.limit
    assert step(env, StemContext()) is False
    assert env.current == "xyz"