"""Braille abbreviations for whole Hangul syllables."""

from hanbraille.unicode import cells

SHORTCUT_MAP: dict[str, bytes] = {
    syllable: cells(patterns)
    for syllable, patterns in {
        "가": "⠫",
        "나": "⠉",
        "다": "⠊",
        "마": "⠑",
        "바": "⠘",
        "사": "⠇",
        "자": "⠨",
        "카": "⠋",
        "타": "⠓",
        "파": "⠙",
        "하": "⠚",
        "것": "⠸⠎",
        "억": "⠹",
        "언": "⠾",
        "얼": "⠞",
        "연": "⠡",
        "열": "⠳",
        "영": "⠻",
        "옥": "⠭",
        "온": "⠷",
        "옹": "⠿",
        "운": "⠛",
        "울": "⠯",
        "은": "⠵",
        "을": "⠮",
        "인": "⠟",
        "성": "⠠⠻",
        "정": "⠨⠻",
        "청": "⠰⠻",
    }.items()
}


def encode_char_shortcut(text: str) -> bytes:
    """Return the abbreviated braille for a syllable that has one."""
    try:
        return SHORTCUT_MAP[text]
    except KeyError:
        raise ValueError("Invalid Korean char shortcut") from None