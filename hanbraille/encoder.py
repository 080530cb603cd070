"""Translation of mixed Korean, English and numeric text into braille."""

import re

from hanbraille import english, korean_part, math_symbol_shortcut, number
from hanbraille import symbol_shortcut, word_shortcut
from hanbraille.char_struct import CharKind, classify_char
from hanbraille.choseong import encode_choseong
from hanbraille.jongseong import encode_jongseong
from hanbraille.jungseong import encode_jungseong
from hanbraille.korean_char import encode_korean_char
from hanbraille.rule import rule_11, rule_12
from hanbraille.split import SYLLABLE_FIRST, SYLLABLE_LAST, split_korean_jauem
from hanbraille.unicode import encode_unicode
from hanbraille.utils import has_choseong_o

_BLANK = 0
_CAPITAL = 32
_CAPITAL_END = 4
_NUMBER_SIGN = 60
_ROMAN_START = 52
_ROMAN_END = 50
_JAMO_ALONE = 63
_JAMO_ATTACHED = 56
_DIGIT_COMMA = 2

# Unicode whitespace, without the separators that only Python counts as space.
_WORD_SEPARATOR = re.compile(r"[^\S\x1c-\x1f]+")

# Initials that a reader could take for digits right after a number (section 44).
_DIGIT_LIKE_INITIALS = frozenset("ㄴㄷㅁㅋㅌㅍㅎ")
# Syllables written in full rather than abbreviated (sections 14, 16, 17).
_SPELLED_OUT = frozenset("팠껐셩쎵졍쪙쳥겄")
# Abbreviated syllables that are spelled out before a vowel (section 14).
_NO_SHORTCUT_BEFORE_VOWEL = frozenset("나다마바자카타파하")


def _is_syllable(c: str) -> bool:
    return SYLLABLE_FIRST <= ord(c) <= SYLLABLE_LAST


def _is_hangul(c: str) -> bool:
    return 0x3131 <= ord(c) <= 0x3163 or _is_syllable(c)


def _is_ascii_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _all_ascii_alpha(word: str) -> bool:
    return all(_is_ascii_alpha(c) for c in word)


def _split_words(text: str) -> list[str]:
    return [word for word in _WORD_SEPARATOR.split(text) if word]


def encode(text: str) -> bytes:
    """Encode text as a sequence of braille cell codes.

    Raises ValueError for characters that have no braille representation.
    """
    result = bytearray()
    words = _split_words(text)
    word_count = len(words)
    is_english = False
    # Roman letter indicators are only used inside Korean text (section 31).
    english_indicator = any(_is_hangul(c) for word in words for c in word)
    triple_big_english = False

    for idx, word in enumerate(words):
        shortcut = word_shortcut.split_word_shortcut(word)
        if shortcut is not None:
            _, code, rest = shortcut
            result += code
            if rest:
                result += encode(rest)
        else:
            chars = list(word)
            word_len = len(chars)
            is_all_uppercase = all(c.isupper() for c in chars)
            has_korean_char = any(_is_syllable(c) for c in chars)

            if english_indicator and not is_english and _is_ascii_alpha(chars[0]):
                result.append(_ROMAN_START)

            if is_all_uppercase and not triple_big_english:
                # Section 28: capital passage for three or more capital words,
                # capital word indicator for a single word of two or more letters.
                if (
                    (idx == 0 or not _all_ascii_alpha(words[idx - 1]))
                    and word_count - idx > 2
                    and _all_ascii_alpha(words[idx + 1])
                    and _all_ascii_alpha(words[idx + 2])
                ):
                    triple_big_english = True
                    result += bytes([_CAPITAL] * 3)
                elif word_len >= 2:
                    result += bytes([_CAPITAL] * 2)

            is_number = False
            is_big_english = False

            for i, c in enumerate(chars):
                char_type = classify_char(c)

                if english_indicator and i > 0 and not _is_ascii_alpha(c):
                    if is_english:
                        result.append(_ROMAN_END)
                    is_english = False

                kind = char_type.kind
                if kind is CharKind.KOREAN:
                    korean = char_type.korean
                    if is_number and (korean.cho in _DIGIT_LIKE_INITIALS or c == "운"):
                        result.append(_BLANK)

                    if c in _SPELLED_OUT:
                        cho0, cho1 = split_korean_jauem(korean.cho)
                        if cho1 is not None:
                            result.append(_CAPITAL)
                        result.append(encode_choseong(cho0))
                        result += encode_jungseong(korean.jung)
                        result += encode_jongseong(korean.jong)
                    elif (
                        c in _NO_SHORTCUT_BEFORE_VOWEL
                        and i < word_len - 1
                        and has_choseong_o(chars[i + 1])
                    ):
                        result.append(encode_choseong(korean.cho))
                        result += encode_jungseong(korean.jung)
                    else:
                        result += encode_korean_char(korean)

                    if i < word_len - 1:
                        result += rule_11(korean, chars[i + 1])
                        result += rule_12(korean, chars[i + 1])

                elif kind is CharKind.KOREAN_PART:
                    if word_len == 1:
                        # Section 8: a jamo standing alone.
                        result.append(_JAMO_ALONE)
                        result += korean_part.encode_korean_part(c)
                    elif word_len == 2:
                        if i == 0 and chars[1] == ".":
                            # Section 9: a consonant used as an item number.
                            result.append(_JAMO_ALONE)
                            result += encode_jongseong(c)
                        else:
                            result.append(_JAMO_ALONE)
                            result += korean_part.encode_korean_part(c)
                    elif i == 0 and chars[1] == "자":
                        result.append(_JAMO_ALONE)
                        result += encode_jongseong(c)
                    elif has_korean_char:
                        # Section 10: a consonant attached to a word.
                        result.append(_JAMO_ATTACHED)
                        result += korean_part.encode_korean_part(c)
                    else:
                        result.append(_JAMO_ALONE)
                        result += encode_jongseong(c)

                elif kind is CharKind.ENGLISH:
                    if (
                        (not is_all_uppercase or word_len < 2)
                        and not is_big_english
                        and c.isupper()
                    ):
                        is_big_english = True
                        for following in chars[i:i + 2]:
                            if not following.isupper():
                                break
                            result.append(_CAPITAL)
                    is_english = True
                    result.append(english.encode_english(c))

                elif kind is CharKind.NUMBER:
                    if not is_number:
                        # Sections 40 and 43: no number sign after '.' or ','.
                        if not (i > 0 and chars[i - 1] in ".,"):
                            result.append(_NUMBER_SIGN)
                        is_number = True
                    result.append(number.encode_number(c))

                elif kind is CharKind.SYMBOL:
                    if (
                        c == ","
                        and is_number
                        and i < word_len - 1
                        and chars[i + 1].isnumeric()
                    ):
                        # Section 41: a comma between digits.
                        result.append(_DIGIT_COMMA)
                    else:
                        result += symbol_shortcut.encode_char_symbol_shortcut(c)

                elif kind is CharKind.SPACE:
                    result.append(_BLANK)

                elif kind is CharKind.MATH_SYMBOL:
                    if i > 0 and any(_is_syllable(p) for p in chars[:i]):
                        result.append(_BLANK)
                    result += math_symbol_shortcut.encode_char_math_symbol_shortcut(c)
                    if i < word_len - 1 and any(_is_syllable(p) for p in chars[i:]):
                        result.append(_BLANK)

                if not c.isnumeric():
                    is_number = False
                if _is_ascii_alpha(c) and not c.isupper():
                    is_big_english = False

        if triple_big_english and not (
            word_count - idx > 1 and _all_ascii_alpha(words[idx + 1])
        ):
            result += bytes([_CAPITAL, _CAPITAL_END])

        if idx != word_count - 1:
            if english_indicator and not _is_ascii_alpha(words[idx + 1][0]):
                if is_english:
                    result.append(_ROMAN_END)
                is_english = False
            result.append(_BLANK)

    return bytes(result)


def encode_to_unicode(text: str) -> str:
    """Encode text as a string of Unicode braille patterns."""
    return "".join(encode_unicode(code) for code in encode(text))


def encode_to_braille_font(text: str) -> str:
    """Encode text for display with a braille font (Unicode patterns)."""
    return "".join(encode_unicode(code) for code in encode(text))


def decode(text: str) -> str:
    """Return the text as a plain string; braille is not translated back.

    Raises TypeError if the argument is not a string.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return str(text)