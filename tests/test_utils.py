import pytest

from hanbraille.split import split_korean_char
from hanbraille.utils import build_char, has_choseong_o


def test_build_char():
    assert build_char("ㅇ", "ㅏ", "ㄱ") == "악"
    assert build_char("ㅇ", "ㅏ", "ㄴ") == "안"


def test_build_char_without_final():
    assert build_char("ㄱ", "ㅏ", None) == "가"
    assert build_char("ㅎ", "ㅏ") == "하"


@pytest.mark.parametrize("syllable", ["강", "한", "글", "녕", "나", "힣", "것"])
def test_build_char_round_trip(syllable):
    parts = [jamo.char for jamo in split_korean_char(syllable)]
    final = parts[2] if len(parts) == 3 else None
    assert build_char(parts[0], parts[1], final) == syllable


@pytest.mark.parametrize(
    ("cho", "jung", "jong"),
    [("a", "ㅏ", None), ("ㄳ", "ㅏ", None), ("ㄱ", "ㄱ", None), ("ㄱ", "ㅏ", "ㄸ")],
)
def test_build_char_invalid(cho, jung, jong):
    with pytest.raises(ValueError):
        build_char(cho, jung, jong)


@pytest.mark.parametrize(
    ("ch", "expected"),
    [("ㅇ", True), ("ㄱ", False), ("아", True), ("가", False), ("앙", True)],
)
def test_has_choseong_o(ch, expected):
    assert has_choseong_o(ch) is expected


def test_has_choseong_o_non_korean():
    assert has_choseong_o("a") is False