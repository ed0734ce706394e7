import parsy
import pytest

from digitparser import parse_digits


def test_parse_digits():
    assert parse_digits("3868") == [3, 8, 6, 8]
    assert parse_digits("0123456789") == list(range(10))


def test_parse_empty():
    assert parse_digits("") == []


@pytest.mark.parametrize("code, index", [("12a3", 2), ("x", 0), ("38 68", 2), ("3868\n", 4), ("-1", 0)])
def test_parse_error(code, index):
    with pytest.raises(parsy.ParseError) as info:
        parse_digits(code)
    assert info.value.index == index
    assert info.value.stream == code
