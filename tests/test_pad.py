import pytest

from exkit.pad import (
    PadDirection,
    both_pad,
    left_pad,
    pad,
    right_pad,
    unsafe_both_pad,
    unsafe_left_pad,
    unsafe_pad,
    unsafe_right_pad,
)

S = "hello world"

PAD_CASES = [
    ("-", S, 10, PadDirection.LEFT),
    ("-", S, 10, PadDirection.RIGHT),
    ("-", S, 10, PadDirection.BOTH),
    ("-", "--" + S, 13, PadDirection.LEFT),
    ("-", S + "--", 13, PadDirection.RIGHT),
    ("-", "-" + S + "-", 13, PadDirection.BOTH),
    ("-", "-" + S + "--", 14, PadDirection.BOTH),
    ("AB", "AB" + S, 13, PadDirection.LEFT),
    ("AB", "ABA" + S, 14, PadDirection.LEFT),
    ("AB", S + "AB", 13, PadDirection.RIGHT),
    ("AB", S + "ABA", 14, PadDirection.RIGHT),
    ("AB", "A" + S + "A", 13, PadDirection.BOTH),
    ("AB", "AB" + S + "AB", 15, PadDirection.BOTH),
    ("AB", "AB" + S + "ABA", 16, PadDirection.BOTH),
]

LEFT_CASES = [
    ("-", S, 10),
    ("-", "--" + S, 13),
    ("AB", "AB" + S, 13),
    ("AB", "ABA" + S, 14),
]

RIGHT_CASES = [
    ("-", S, 10),
    ("-", S + "--", 13),
    ("AB", S + "AB", 13),
    ("AB", S + "ABA", 14),
]

BOTH_CASES = [
    ("-", S, 10),
    ("-", "-" + S + "-", 13),
    ("-", "-" + S + "--", 14),
    ("AB", "A" + S + "A", 13),
    ("AB", "AB" + S + "AB", 15),
    ("AB", "AB" + S + "ABA", 16),
]


@pytest.mark.parametrize("func", [pad, unsafe_pad])
@pytest.mark.parametrize("fill, expected, count, flag", PAD_CASES)
def test_pad(func, fill, expected, count, flag):
    assert func(S, fill, count, flag) == expected


@pytest.mark.parametrize("func", [left_pad, unsafe_left_pad])
@pytest.mark.parametrize("fill, expected, count", LEFT_CASES)
def test_left_pad(func, fill, expected, count):
    assert func(S, fill, count) == expected


@pytest.mark.parametrize("func", [right_pad, unsafe_right_pad])
@pytest.mark.parametrize("fill, expected, count", RIGHT_CASES)
def test_right_pad(func, fill, expected, count):
    assert func(S, fill, count) == expected


@pytest.mark.parametrize("func", [both_pad, unsafe_both_pad])
@pytest.mark.parametrize("fill, expected, count", BOTH_CASES)
def test_both_pad(func, fill, expected, count):
    assert func(S, fill, count) == expected


def test_pad_accepts_plain_int_flags():
    assert pad(S, "-", 13, 0) == "--" + S
    assert pad(S, "-", 13, 1) == "-" + S + "-"
    assert pad(S, "-", 13, 2) == S + "--"


def test_pad_rejects_unknown_flag():
    with pytest.raises(ValueError):
        pad(S, "-", 13, 7)


def test_pad_rejects_empty_fill_when_padding_needed():
    with pytest.raises(ValueError):
        left_pad(S, "", 13)


def test_empty_fill_is_fine_when_no_padding_needed():
    assert right_pad(S, "", 5) == S


def test_long_pad_length_and_content():
    result = left_pad("A" * 1000, "B" * 10, 100000)
    assert len(result) == 100000
    assert result.endswith("A" * 1000)
    assert set(result[:-1000]) == {"B"}