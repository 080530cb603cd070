import pytest

from hanbraille.split import Jamo, JamoRole, split_korean_char, split_korean_jauem

CHO = JamoRole.CHOSEONG
JUNG = JamoRole.JUNGSEONG
JONG = JamoRole.JONGSEONG


@pytest.mark.parametrize(
    ("syllable", "expected"),
    [
        ("강", [Jamo(CHO, "ㄱ"), Jamo(JUNG, "ㅏ"), Jamo(JONG, "ㅇ")]),
        ("한", [Jamo(CHO, "ㅎ"), Jamo(JUNG, "ㅏ"), Jamo(JONG, "ㄴ")]),
        ("글", [Jamo(CHO, "ㄱ"), Jamo(JUNG, "ㅡ"), Jamo(JONG, "ㄹ")]),
        ("안", [Jamo(CHO, "ㅇ"), Jamo(JUNG, "ㅏ"), Jamo(JONG, "ㄴ")]),
        ("녕", [Jamo(CHO, "ㄴ"), Jamo(JUNG, "ㅕ"), Jamo(JONG, "ㅇ")]),
        ("나", [Jamo(CHO, "ㄴ"), Jamo(JUNG, "ㅏ")]),
        ("라", [Jamo(CHO, "ㄹ"), Jamo(JUNG, "ㅏ")]),
    ],
)
def test_split(syllable, expected):
    assert split_korean_char(syllable) == expected


@pytest.mark.parametrize("jamo", list("ㄱㄴㄷㅁㅂㅅㅈㅊㅋㅌㅍㅎ"))
def test_split_choseong(jamo):
    assert split_korean_char(jamo) == [Jamo(CHO, jamo)]


@pytest.mark.parametrize("jamo", list("ㅏㅐㅑㅒㅓㅔㅕㅖㅗㅘㅙㅚㅛㅜㅝㅞㅟㅠㅡㅢㅣ"))
def test_split_jungseong(jamo):
    assert split_korean_char(jamo) == [Jamo(JUNG, jamo)]


@pytest.mark.parametrize("text", ["a", "1"])
def test_split_wrong(text):
    with pytest.raises(ValueError, match="Invalid Korean character"):
        split_korean_char(text)


def test_split_edges_of_syllable_block():
    assert split_korean_char("가") == [Jamo(CHO, "ㄱ"), Jamo(JUNG, "ㅏ")]
    assert split_korean_char("힣") == [
        Jamo(CHO, "ㅎ"),
        Jamo(JUNG, "ㅣ"),
        Jamo(JONG, "ㅎ"),
    ]


@pytest.mark.parametrize(
    ("jamo", "expected"),
    [
        ("ㄱ", ("ㄱ", None)),
        ("ㄲ", ("ㄱ", "ㄱ")),
        ("ㄳ", ("ㄱ", "ㅅ")),
        ("ㅀ", ("ㄹ", "ㅎ")),
        ("ㅆ", ("ㅅ", "ㅅ")),
        ("ㅎ", ("ㅎ", None)),
    ],
)
def test_split_korean_jauem(jamo, expected):
    assert split_korean_jauem(jamo) == expected


@pytest.mark.parametrize("text", ["ㅏ", "가", "a"])
def test_split_korean_jauem_invalid(text):
    with pytest.raises(ValueError, match="Invalid Korean character"):
        split_korean_jauem(text)