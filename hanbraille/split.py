"""Splitting Hangul syllables and consonant clusters into jamo."""

from dataclasses import dataclass
from enum import Enum

SYLLABLE_FIRST = 0xAC00
SYLLABLE_LAST = 0xD7A3

CHOSEONG = "ㄱㄲㄴㄷㄸㄹㅁㅂㅃㅅㅆㅇㅈㅉㅊㅋㅌㅍㅎ"
JUNGSEONG = "ㅏㅐㅑㅒㅓㅔㅕㅖㅗㅘㅙㅚㅛㅜㅝㅞㅟㅠㅡㅢㅣ"
# Finals without the empty slot; a syllable's final index 0 means "no final".
JONGSEONG = "ㄱㄲㄳㄴㄵㄶㄷㄹㄺㄻㄼㄽㄾㄿㅀㅁㅂㅄㅅㅆㅇㅈㅊㅋㅌㅍㅎ"


class JamoRole(Enum):
    """Position of a jamo within a syllable."""

    CHOSEONG = "choseong"
    JUNGSEONG = "jungseong"
    JONGSEONG = "jongseong"


@dataclass(frozen=True)
class Jamo:
    """A single jamo together with its role."""

    role: JamoRole
    char: str


KOREAN_JAUEM_MAP: dict[str, tuple[str, str | None]] = {
    "ㄱ": ("ㄱ", None),
    "ㄲ": ("ㄱ", "ㄱ"),
    "ㄳ": ("ㄱ", "ㅅ"),
    "ㄴ": ("ㄴ", None),
    "ㄵ": ("ㄴ", "ㅈ"),
    "ㄶ": ("ㄴ", "ㅎ"),
    "ㄷ": ("ㄷ", None),
    "ㄸ": ("ㄷ", "ㄷ"),
    "ㄹ": ("ㄹ", None),
    "ㄺ": ("ㄹ", "ㄱ"),
    "ㄻ": ("ㄹ", "ㅁ"),
    "ㄼ": ("ㄹ", "ㅂ"),
    "ㄽ": ("ㄹ", "ㅅ"),
    "ㄾ": ("ㄹ", "ㅌ"),
    "ㄿ": ("ㄹ", "ㅍ"),
    "ㅀ": ("ㄹ", "ㅎ"),
    "ㅁ": ("ㅁ", None),
    "ㅂ": ("ㅂ", None),
    "ㅃ": ("ㅂ", "ㅂ"),
    "ㅄ": ("ㅂ", "ㅅ"),
    "ㅅ": ("ㅅ", None),
    "ㅆ": ("ㅅ", "ㅅ"),
    "ㅇ": ("ㅇ", None),
    "ㅈ": ("ㅈ", None),
    "ㅉ": ("ㅈ", "ㅈ"),
    "ㅊ": ("ㅊ", None),
    "ㅋ": ("ㅋ", None),
    "ㅌ": ("ㅌ", None),
    "ㅍ": ("ㅍ", None),
    "ㅎ": ("ㅎ", None),
}


def split_korean_jauem(text: str) -> tuple[str, str | None]:
    """Split a consonant into its first part and an optional second part."""
    try:
        return KOREAN_JAUEM_MAP[text]
    except KeyError:
        raise ValueError("Invalid Korean character") from None


def split_korean_char(text: str) -> list[Jamo]:
    """Split a Hangul syllable or compatibility jamo into its jamo."""
    code = ord(text)
    if 0x3131 <= code <= 0x314E:
        return [Jamo(JamoRole.CHOSEONG, text)]
    if 0x314F <= code <= 0x3163:
        return [Jamo(JamoRole.JUNGSEONG, text)]
    if not SYLLABLE_FIRST <= code <= SYLLABLE_LAST:
        raise ValueError("Invalid Korean character")

    offset = code - SYLLABLE_FIRST
    cho, rest = divmod(offset, 21 * 28)
    jung, jong = divmod(rest, 28)

    parts = [
        Jamo(JamoRole.CHOSEONG, CHOSEONG[cho]),
        Jamo(JamoRole.JUNGSEONG, JUNGSEONG[jung]),
    ]
    if jong:
        parts.append(Jamo(JamoRole.JONGSEONG, JONGSEONG[jong - 1]))
    return parts