# hanbraille

Encode Korean text into Korean braille. The encoder handles Hangul syllables,
standalone jamo, syllable and word abbreviations, Latin letters, digits,
punctuation and a few math signs.

## Installation

```
pip install hanbraille
```

## Usage

```python
from hanbraille.encoder import encode, encode_to_unicode

encode_to_unicode("안녕하세요")        # '⠣⠒⠉⠻⠚⠠⠝⠬'
encode_to_unicode("WELCOME TO KOREA")  # '⠠⠠⠠⠺⠑⠇⠉⠕⠍⠑⠀⠞⠕⠀⠅⠕⠗⠑⠁⠠⠄'
encode_to_unicode("1,000")             # '⠼⠁⠂⠚⠚⠚'

encode("안") == bytes([35, 18])        # True
```

`hanbraille.encoder.encode` returns `bytes`, one braille cell per byte, each
cell a value from 0 to 63 with one bit per dot. `encode_to_unicode` maps the
cells onto the Unicode braille block starting at U+2800; words are separated
by the blank cell `⠀`. `encode_to_braille_font` gives the same string.

Text is split into words on whitespace. A character with no braille
representation raises `ValueError`.

### What is covered

- Hangul syllables, including the syllable abbreviations (such as `것`, `억`,
  `영`) and the word abbreviations `그래서`, `그러나`, `그러면`, `그러므로`,
  `그런데`, `그리고`, `그리하여` at the start of a word
- Standalone consonants and vowels, and consonants used as item numbers (`ㄱ.`)
- The separator `⠤` between vowels where a following `예` or `애` would
  otherwise run together
- Latin letters, with the Roman-letter start and end indicators inside Korean
  text and the capital, capital-word and capital-passage indicators
- Digits with the number sign, decimal points and thousands commas
- Common punctuation and brackets, and the math signs `+ − × ÷ = < >`

### Lower-level helpers

The building blocks can be used on their own, for example:

- `hanbraille.split.split_korean_char` splits a syllable or jamo into a list
  of `Jamo` values tagged with a `JamoRole`; `split_korean_jauem` splits a
  double or compound consonant
- `hanbraille.utils.build_char` composes a syllable from its jamo and
  `has_choseong_o` tells whether a syllable starts with a silent `ㅇ`
- `hanbraille.char_struct.classify_char` returns a `CharType` with a
  `CharKind`, and `decompose_syllable` returns a `KoreanChar`
- `hanbraille.korean_char.encode_korean_char` encodes one syllable
- `hanbraille.unicode.encode_unicode` and `decode_unicode` convert between
  cell values and braille pattern characters

## Limitations

Only encoding is provided. `hanbraille.encoder.decode` does not read braille:
it returns the string it is given unchanged. There is no command-line program;
the package is used as a library.

## Running the tests

```
pip install -e ".[test]"
pytest
```