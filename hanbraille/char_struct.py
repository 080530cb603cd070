"""Classification of input characters."""

from dataclasses import dataclass
from enum import Enum

from hanbraille.math_symbol_shortcut import is_math_symbol_char
from hanbraille.split import (
    CHOSEONG,
    JONGSEONG,
    JUNGSEONG,
    SYLLABLE_FIRST,
    SYLLABLE_LAST,
)
from hanbraille.symbol_shortcut import is_symbol_char

_JAMO_FIRST = 0x3131
_JAMO_LAST = 0x3163
# Python treats these separators as whitespace; Unicode White_Space does not.
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


@dataclass(frozen=True)
class KoreanChar:
    """A Hangul syllable split into initial, vowel and optional final."""

    cho: str
    jung: str
    jong: str | None = None


class CharKind(Enum):
    """Category of an input character."""

    KOREAN = "korean"
    KOREAN_PART = "korean_part"
    ENGLISH = "english"
    NUMBER = "number"
    SYMBOL = "symbol"
    MATH_SYMBOL = "math_symbol"
    SPACE = "space"


@dataclass(frozen=True)
class CharType:
    """A classified character; ``korean`` is set for Hangul syllables."""

    kind: CharKind
    char: str
    korean: KoreanChar | None = None


def _is_syllable(c: str) -> bool:
    return SYLLABLE_FIRST <= ord(c) <= SYLLABLE_LAST


def decompose_syllable(c: str) -> KoreanChar:
    """Split a precomposed Hangul syllable into its jamo."""
    if len(c) != 1 or not _is_syllable(c):
        raise ValueError("Invalid Korean character")
    cho, rest = divmod(ord(c) - SYLLABLE_FIRST, 21 * 28)
    jung, jong = divmod(rest, 28)
    return KoreanChar(
        cho=CHOSEONG[cho],
        jung=JUNGSEONG[jung],
        jong=JONGSEONG[jong - 1] if jong else None,
    )


def classify_char(c: str) -> CharType:
    """Classify a single character, raising ValueError if it is unsupported."""
    if len(c) != 1:
        raise ValueError("Invalid character")
    if c.isascii() and c.isalpha():
        return CharType(CharKind.ENGLISH, c)
    if c in "0123456789":
        return CharType(CharKind.NUMBER, c)
    if is_symbol_char(c):
        return CharType(CharKind.SYMBOL, c)
    if is_math_symbol_char(c):
        return CharType(CharKind.MATH_SYMBOL, c)
    if _JAMO_FIRST <= ord(c) <= _JAMO_LAST:
        return CharType(CharKind.KOREAN_PART, c)
    if _is_syllable(c):
        return CharType(CharKind.KOREAN, c, decompose_syllable(c))
    if c.isspace() and c not in _NOT_WHITESPACE:
        return CharType(CharKind.SPACE, c)
    raise ValueError("Invalid character")