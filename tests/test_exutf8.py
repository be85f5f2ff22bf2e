import pytest

from exkit.exutf8 import (
    rune_index,
    rune_index_in_string,
    rune_sub,
    rune_sub_string,
)

TEXT = "Xy（又称Xylang）是Vendor开发的一种静态强类型、编译型、并发型，并具有垃圾回收功能的编程语言"


@pytest.mark.parametrize(
    "data, n, expected_index, expected_ok",
    [
        (b"abcd", 3, 3, True),
        ("☺☻☹".encode(), 2, 6, True),
        ("☺☻☹".encode(), 3, 9, True),
        (b"1,2,3,4", 5, 5, True),
        (b"\xe2\x00", 2, 2, True),
        (b"\xe2\x80", 1, 1, True),
        (b"\xe2\x80", 2, 2, True),
        (b"a\xe2\x80", 5, 3, False),
        (b"xylang", 5, 5, True),
        ("Xy 语言".encode(), 4, 6, True),
        (b"12345", 0, 0, True),
        (b"12345", -1, 0, True),
    ],
)
def test_rune_index(data, n, expected_index, expected_ok):
    assert rune_index(data, n) == (expected_index, expected_ok)
    assert rune_index(bytearray(data), n) == (expected_index, expected_ok)


@pytest.mark.parametrize(
    "text, n, expected_index, expected_ok",
    [
        ("abcd", 3, 3, True),
        ("☺☻☹", 2, 2, True),
        ("☺☻☹", 3, 3, True),
        ("1,2,3,4", 5, 5, True),
        ("xylang", 5, 5, True),
        ("Xy 语言", 4, 4, True),
        ("12345", 0, 0, True),
        ("12345", -1, 0, True),
        ("a语", 5, 2, False),
    ],
)
def test_rune_index_in_string(text, n, expected_index, expected_ok):
    assert rune_index_in_string(text, n) == (expected_index, expected_ok)


def test_rune_index_in_string_matches_byte_index():
    text = "Xy 语言是"
    for n in range(len(text) + 2):
        char_index, ok = rune_index_in_string(text, n)
        byte_index, byte_ok = rune_index(text.encode(), n)
        assert ok == byte_ok
        assert text[:char_index].encode() == text.encode()[:byte_index]


SUB_CASES = [
    (-1, 0, TEXT, "言"),
    (-2, 0, TEXT, "语言"),
    (-3, 1, TEXT, "程"),
    (-3, -1, TEXT, "程语"),
    (0, -1, TEXT, "Xy（又称Xylang）是Vendor开发的一种静态强类型、编译型、并发型，并具有垃圾回收功能的编程语"),
    (2, -1, TEXT, "（又称Xylang）是Vendor开发的一种静态强类型、编译型、并发型，并具有垃圾回收功能的编程语"),
    (52, 52, TEXT, ""),
    (3, 5, TEXT, "又称Xyl"),
    (1, 0, TEXT, "y（又称Xylang）是Vendor开发的一种静态强类型、编译型、并发型，并具有垃圾回收功能的编程语言"),
    (0, 10000, "", ""),
    (-10000, 10000, TEXT, ""),
    (0, -10000, TEXT, ""),
]


@pytest.mark.parametrize("start, length, text, expected", SUB_CASES)
def test_rune_sub(start, length, text, expected):
    assert rune_sub(text.encode(), start, length) == expected.encode()


@pytest.mark.parametrize("start, length, text, expected", SUB_CASES)
def test_rune_sub_string(start, length, text, expected):
    assert rune_sub_string(text, start, length) == expected


def test_rune_sub_keeps_bytearray_type():
    out = rune_sub(bytearray("语言abc".encode()), 1, 2)
    assert isinstance(out, bytearray)
    assert out == "言a".encode()


def test_rune_sub_treats_invalid_bytes_as_single_characters():
    assert rune_sub(b"a\xff\xfeb", 1, 2) == b"\xff\xfe"
    assert rune_sub(b"a\xff\xfeb", -1, 0) == b"b"