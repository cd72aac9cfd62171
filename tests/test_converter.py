import random

import pytest
from anyuid.base.alphabets import BASE62, BIN, DEC, HEX, OCT
from anyuid.base.converter import convert, is_valid
from anyuid.errors import InvalidAlphabet, InvalidArgument, InvalidInput


def test_default_alphabets():
    assert BIN == "01"
    assert OCT == "01234567"
    assert DEC == "0123456789"
    assert HEX == "0123456789abcdef"


@pytest.mark.parametrize(
    "source, destination, input, expected",
    [
        (HEX, BIN, "2d5e", "10110101011110"),
        (BIN, HEX, "10110101011110", "2d5e"),
        (DEC, HEX, "11614", "2d5e"),
        (HEX, DEC, "2d5e", "11614"),
        (OCT, DEC, "26536", "11614"),
        (DEC, OCT, "11614", "26536"),
        (DEC, BASE62, "61", "Z"),
        (DEC, BASE62, "62", "10"),
    ],
)
def test_convert(source, destination, input, expected):
    assert convert(source, destination, input) == expected


def test_convert_round_trip_with_punctuation():
    alphabet = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_-.,"
    conversion = convert(DEC, alphabet, "123456789123456789")
    assert convert(alphabet, DEC, conversion) == "123456789123456789"


def test_convert_random_input():
    rng = random.Random(42)
    for _ in range(2000):
        number = rng.randrange(1000 * 1000)
        conversion = convert(DEC, HEX, str(number))
        assert conversion == format(number, "x")
        assert convert(HEX, DEC, conversion) == str(number)


def test_convert_beyond_native_integers():
    rng = random.Random(7)
    for _ in range(200):
        number = rng.getrandbits(512)
        assert convert(DEC, HEX, str(number)) == format(number, "x")
        assert convert(HEX, BIN, format(number, "x")) == format(number, "b")
    number = 2**1000 + 1
    assert convert(BIN, DEC, format(number, "b")) == str(number)


def test_convert_zero_and_leading_zeros():
    assert convert(DEC, HEX, "0") == "0"
    assert convert(DEC, HEX, "0000") == "0"
    assert convert(DEC, HEX, "007") == "7"
    assert convert(HEX, BIN, "00ff") == "11111111"


def test_convert_empty_input():
    # distinct alphabets flush one remainder: the zero symbol
    assert convert(DEC, HEX, "") == "0"
    assert convert(BIN, "xyz", "") == "x"
    # identical alphabets return the input untouched
    assert convert(DEC, DEC, "") == ""


def test_convert_to_same_alphabet():
    assert convert(BIN, "01", "010101") == "010101"
    assert convert(DEC, "0123456789", "265369") == "265369"
    # leading zeros are kept, no arithmetic happens
    assert convert(HEX, HEX, "00ff") == "00ff"


def test_convert_invalid_alphabet():
    with pytest.raises(InvalidAlphabet):
        convert(BIN, "", "010101")
    with pytest.raises(InvalidAlphabet):
        convert("", BIN, "010101")
    with pytest.raises(InvalidAlphabet):
        convert(None, BIN, "010101")
    with pytest.raises(InvalidAlphabet, match="at least 2 symbols"):
        convert(BIN, "0", "010101")
    with pytest.raises(InvalidAlphabet, match="at least 2 symbols"):
        convert("0", BIN, "000")


def test_convert_invalid_input():
    with pytest.raises(InvalidInput) as error:
        convert(BIN, DEC, "010101-NOT-WORK")
    assert "010101-NOT-WORK" in str(error.value)
    # validation comes before the identical-alphabet shortcut
    with pytest.raises(InvalidInput):
        convert(BIN, BIN, "012")
    assert issubclass(InvalidInput, InvalidArgument)
    assert issubclass(InvalidAlphabet, InvalidArgument)


def test_convert_duplicate_symbols():
    # first occurrence gives the digit value in a source alphabet
    assert convert("aab", DEC, "ba") == "6"
    # duplicates in a destination alphabet are accepted
    assert convert(DEC, "AAB", "5") == "AB"


def test_is_valid():
    assert is_valid(HEX, "2d5e")
    assert is_valid(HEX, "")
    assert not is_valid(HEX, "2D5E")
    assert not is_valid(BIN, "012")
