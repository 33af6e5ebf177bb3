"""
Pydantic types for carrying RIF numbers through validated models.

RifField parses strings into Rif values inside any BaseModel and dumps
them back as the canonical string. RifParts exposes the three parts as
separate fields for payloads that do not use the dashed form.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator, field_validator

from rifven.domain import Category, Rif


def _coerce_rif(value: Any) -> Rif:
    if isinstance(value, Rif):
        return value
    if isinstance(value, str):
        # RifError subclasses ValueError, which pydantic reports as a validation error
        return Rif.parse(value)
    raise ValueError(f"RIF must be a string or Rif, got {type(value).__name__}")


RifField = Annotated[
    Rif,
    PlainValidator(_coerce_rif),
    PlainSerializer(str, return_type=str),
]


class RifParts(BaseModel):
    """A RIF split into category code, payer id and check digit."""
    model_config = ConfigDict(frozen=True)

    category: str = Field(
        ...,
        description="Category code (C, E, G, J, P, V)",
        examples=["J"],
    )
    payer_id: int = Field(
        ...,
        ge=0,
        le=999_999_999,
        description="Payer identifier, at most 9 digits",
    )
    check_digit: int = Field(
        ...,
        ge=0,
        le=9,
        description="Check digit",
    )

    @field_validator("category")
    @classmethod
    def normalize_category(cls, value: str) -> str:
        return Category.parse(value).to_code()

    @classmethod
    def from_rif(cls, rif: Rif) -> "RifParts":
        return cls(
            category=rif.category.to_code(),
            payer_id=rif.payer_id,
            check_digit=rif.check_digit,
        )

    def to_rif(self) -> Rif:
        """Build the Rif, raising UnexpectedCheckDigit if the digit is wrong."""
        return Rif(Category.parse(self.category), self.payer_id, self.check_digit)
