import pytest

from hanbraille.char_struct import (
    CharKind,
    KoreanChar,
    classify_char,
    decompose_syllable,
)


@pytest.mark.parametrize(
    ("char", "kind"),
    [
        ("A", CharKind.ENGLISH),
        ("1", CharKind.NUMBER),
        ("!", CharKind.SYMBOL),
        ("ㄱ", CharKind.KOREAN_PART),
        (" ", CharKind.SPACE),
        ("+", CharKind.MATH_SYMBOL),
        ("가", CharKind.KOREAN),
    ],
)
def test_char_type(char, kind):
    result = classify_char(char)
    assert result.kind is kind
    assert result.char == char


def test_korean_classification_carries_syllable():
    assert classify_char("강").korean == KoreanChar("ㄱ", "ㅏ", "ㅇ")


def test_non_korean_classification_has_no_syllable():
    assert classify_char("A").korean is None


@pytest.mark.parametrize(
    ("syllable", "expected"),
    [
        ("강", KoreanChar("ㄱ", "ㅏ", "ㅇ")),
        ("한", KoreanChar("ㅎ", "ㅏ", "ㄴ")),
        ("글", KoreanChar("ㄱ", "ㅡ", "ㄹ")),
        ("안", KoreanChar("ㅇ", "ㅏ", "ㄴ")),
        ("녕", KoreanChar("ㄴ", "ㅕ", "ㅇ")),
        ("나", KoreanChar("ㄴ", "ㅏ", None)),
        ("라", KoreanChar("ㄹ", "ㅏ", None)),
    ],
)
def test_decompose_syllable(syllable, expected):
    assert decompose_syllable(syllable) == expected


@pytest.mark.parametrize("text", ["a", "1", "ㄱ", ""])
def test_decompose_rejects_non_syllables(text):
    with pytest.raises(ValueError, match="Invalid Korean character"):
        decompose_syllable(text)


@pytest.mark.parametrize("text", ["@", "é", "\x1c", "ab"])
def test_unsupported_characters_raise(text):
    with pytest.raises(ValueError, match="Invalid character"):
        classify_char(text)