"""Braille for a single Hangul syllable."""

from hanbraille.char_shortcut import SHORTCUT_MAP
from hanbraille.char_struct import KoreanChar
from hanbraille.choseong import encode_choseong
from hanbraille.jongseong import encode_jongseong
from hanbraille.jungseong import encode_jungseong
from hanbraille.split import split_korean_jauem
from hanbraille.utils import build_char

_DOUBLE_MARK = 32


def encode_korean_char(korean: KoreanChar) -> bytes:
    """Encode one syllable, using abbreviations where they apply."""
    cho0, cho1 = split_korean_jauem(korean.cho)
    result = bytearray()
    if cho1 is not None:
        # A doubled initial is marked by a leading ⠠.
        result.append(_DOUBLE_MARK)

    def initial() -> None:
        if cho0 != "ㅇ":
            result.append(encode_choseong(cho0))

    if korean.jong is not None:
        jong0, jong1 = split_korean_jauem(korean.jong)
        vowel_final = SHORTCUT_MAP.get(build_char("ㅇ", korean.jung, jong0))
        whole = SHORTCUT_MAP.get(build_char(cho0, korean.jung, jong0))
        open_syllable = SHORTCUT_MAP.get(build_char(cho0, korean.jung))
        if vowel_final is not None:
            initial()
            result += vowel_final
            if jong1 is not None:
                result += encode_jongseong(jong1)
        elif whole is not None:
            result += whole
            if jong1 is not None:
                result += encode_jongseong(jong1)
        elif open_syllable is not None:
            result += open_syllable
            result += encode_jongseong(korean.jong)
        else:
            initial()
            result += encode_jungseong(korean.jung)
            result += encode_jongseong(korean.jong)
    else:
        open_syllable = SHORTCUT_MAP.get(build_char(cho0, korean.jung))
        if open_syllable is not None:
            result += open_syllable
        else:
            initial()
            result += encode_jungseong(korean.jung)

    return bytes(result)