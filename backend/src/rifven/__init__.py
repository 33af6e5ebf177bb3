"""
rifven - Venezuelan RIF fiscal identifiers.

Parse, validate and build RIF numbers such as "J-07013380-5":

    >>> from rifven import Category, Rif
    >>> Rif.parse("J-07013380-5") == Rif(Category.LEGAL, 7013380, 5)
    True
"""

import logging

from .domain import (
    Category,
    InvalidCategory,
    InvalidCheckDigit,
    InvalidIdentifier,
    InvalidIdentifierNumber,
    Rif,
    RifError,
    UnexpectedCheckDigit,
    compute_check_digit,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Category",
    "Rif",
    "compute_check_digit",
    "RifError",
    "InvalidCategory",
    "InvalidCheckDigit",
    "InvalidIdentifier",
    "InvalidIdentifierNumber",
    "UnexpectedCheckDigit",
    "__version__",
]
