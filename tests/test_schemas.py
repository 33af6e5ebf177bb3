"""Tests for the pydantic RIF field type and the RifParts model."""

import pytest
from pydantic import BaseModel, ValidationError

from rifven import Category, Rif, UnexpectedCheckDigit
from rifven.schemas import RifField, RifParts


class Supplier(BaseModel):
    name: str
    rif: RifField


def test_rif_field_parses_strings():
    supplier = Supplier(name="Acme", rif="j-07013380-5")

    assert supplier.rif == Rif(Category.LEGAL, 7013380, 5)


def test_rif_field_accepts_instances():
    rif = Rif(Category.GOVERNMENT, 20000044, 9)

    assert Supplier(name="Acme", rif=rif).rif is rif


def test_rif_field_dumps_canonical_string():
    supplier = Supplier(name="Acme", rif="j-7013380-5")

    assert supplier.model_dump() == {"name": "Acme", "rif": "J-07013380-5"}
    assert '"J-07013380-5"' in supplier.model_dump_json()


@pytest.mark.parametrize("raw", ["J-07013380-4", "M-00000001-3", "G200000040", 7013380])
def test_rif_field_rejects_invalid_values(raw):
    with pytest.raises(ValidationError):
        Supplier(name="Acme", rif=raw)


def test_rif_field_reports_domain_message():
    with pytest.raises(ValidationError) as exc_info:
        Supplier(name="Acme", rif="J-07013380-4")

    assert "expected 5 and received 4" in str(exc_info.value)


def test_parts_round_trip():
    rif = Rif(Category.LEGAL, 31286704, 3)
    parts = RifParts.from_rif(rif)

    assert parts == RifParts(category="J", payer_id=31286704, check_digit=3)
    assert parts.to_rif() == rif


def test_parts_normalize_category_case():
    assert RifParts(category="g", payer_id=20000004, check_digit=0).category == "G"


@pytest.mark.parametrize(
    "fields",
    [
        {"category": "M", "payer_id": 1, "check_digit": 3},
        {"category": "J", "payer_id": -1, "check_digit": 0},
        {"category": "J", "payer_id": 1_000_000_000, "check_digit": 0},
        {"category": "J", "payer_id": 19361, "check_digit": 10},
    ],
)
def test_parts_validate_fields(fields):
    with pytest.raises(ValidationError):
        RifParts(**fields)


def test_parts_to_rif_checks_digit():
    parts = RifParts(category="J", payer_id=18461, check_digit=4)

    with pytest.raises(UnexpectedCheckDigit) as exc_info:
        parts.to_rif()

    assert exc_info.value == UnexpectedCheckDigit(5, 4)
