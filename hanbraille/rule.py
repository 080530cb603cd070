"""Separator rules between adjacent vowels."""

from hanbraille.char_struct import CharKind, KoreanChar, classify_char

SEPARATOR = bytes([36])
"""The separator cell ⠤ placed between vowels that would otherwise merge."""

_RULE_12_VOWELS = frozenset("ㅑㅘㅜㅝ")


def _next_syllable(next_char: str) -> KoreanChar | None:
    classified = classify_char(next_char)
    return classified.korean if classified.kind is CharKind.KOREAN else None


def rule_11(current: KoreanChar, next_char: str) -> bytes:
    """Separator for a vowel-final syllable followed by '예' (section 11)."""
    following = _next_syllable(next_char)
    if (
        following is not None
        and current.jong is None
        and following.cho == "ㅇ"
        and following.jung == "ㅖ"
    ):
        return SEPARATOR
    return b""


def rule_12(current: KoreanChar, next_char: str) -> bytes:
    """Separator for 'ㅑ, ㅘ, ㅜ, ㅝ' followed by '애' (section 12)."""
    following = _next_syllable(next_char)
    if (
        following is not None
        and current.jong is None
        and current.jung in _RULE_12_VOWELS
        and following.cho == "ㅇ"
        and following.jung == "ㅐ"
    ):
        return SEPARATOR
    return b""