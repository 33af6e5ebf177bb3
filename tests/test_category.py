"""Tests for RIF category parsing, codes and checksum weights."""

import pytest

from rifven import Category, InvalidCategory


CODES = {
    "C": Category.TOWNSHIP,
    "E": Category.FOREIGNER,
    "G": Category.GOVERNMENT,
    "J": Category.LEGAL,
    "P": Category.PASSPORT,
    "V": Category.VENEZUELAN,
}


@pytest.mark.parametrize("code, category", CODES.items())
def test_parse_is_case_insensitive(code: str, category: Category):
    assert Category.parse(code) is category
    assert Category.parse(code.lower()) is category


@pytest.mark.parametrize("category", list(Category))
def test_to_code_round_trips(category: Category):
    code = category.to_code()

    assert code.isupper()
    assert str(category) == code
    assert Category.parse(code) is category
    assert Category.parse(Category.parse(code.lower()).to_code()) is category


def test_weights():
    assert Category.VENEZUELAN.weight == 1
    assert Category.FOREIGNER.weight == 2
    assert Category.LEGAL.weight == 3
    assert Category.TOWNSHIP.weight == 3
    assert Category.PASSPORT.weight == 4
    assert Category.GOVERNMENT.weight == 5


def test_every_category_has_description():
    for category in Category:
        assert category.description


@pytest.mark.parametrize("raw", ["M", "X", "m", "", "JJ", "1", "-", " J"])
def test_parse_rejects_unknown_codes(raw: str):
    with pytest.raises(InvalidCategory) as exc_info:
        Category.parse(raw)

    assert exc_info.value == InvalidCategory(raw)
    assert exc_info.value.raw == raw


def test_weight_is_a_property():
    assert isinstance(Category.LEGAL.weight, int)
