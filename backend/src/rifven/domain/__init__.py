"""
Domain package - RIF categories, the Rif value object and its errors.

Pure Python with no I/O: everything here validates in memory.
"""

from .category import Category
from .errors import (
    InvalidCategory,
    InvalidCheckDigit,
    InvalidIdentifier,
    InvalidIdentifierNumber,
    RifError,
    UnexpectedCheckDigit,
)
from .rif import Rif, compute_check_digit

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
]
