"""
Venezuelan RIF (Registro de Información Fiscal) value object.

Anatomy of a RIF string:

    J - 07013380 - 5
    ^   ^^^^^^^^   ^
    A   B          C

A: Category code of the holder (see Category)
B: Payer identifier, up to 9 digits, leading zeros allowed
C: Check digit computed from A and B

Design Decisions:
- Rif is a frozen dataclass validated in __post_init__, so an instance
  with a wrong check digit can never exist
- Parsing validates segments in a fixed order so that inputs with several
  problems always report the same error
- Digits are checked with a regex before int() so that whitespace, signs
  and underscores accepted by int() are rejected
"""

import logging
import re
from dataclasses import dataclass

from .category import Category
from .errors import (
    InvalidCategory,
    InvalidCheckDigit,
    InvalidIdentifier,
    InvalidIdentifierNumber,
    RifError,
    UnexpectedCheckDigit,
)

logger = logging.getLogger(__name__)


SEPARATOR = "-"

# Number of digit slots in the checksum sum
PAYER_ID_LENGTH = 9
MAX_PAYER_ID = 10**PAYER_ID_LENGTH - 1

# Zero padding used when rendering the payer id
DISPLAY_WIDTH = 8

# Multipliers for slots 1..8; slot 0 holds category.weight * 4
SLOT_MULTIPLIERS = (3, 2, 7, 6, 5, 4, 3, 2)
CATEGORY_MULTIPLIER = 4

# Check digit segment must fit in one byte
MAX_CHECK_DIGIT_VALUE = 255

_DIGITS = re.compile(r"[0-9]+")


def _check_category(category: Category | str) -> Category:
    """Return category as a Category, resolving single-letter codes."""
    if isinstance(category, Category):
        return category
    if isinstance(category, str):
        return Category.parse(category)
    raise InvalidCategory(f"{category!r} ({type(category).__name__})")


def _check_payer_id(payer_id: int) -> int:
    if isinstance(payer_id, bool) or not isinstance(payer_id, int):
        raise InvalidIdentifierNumber(InvalidIdentifierNumber.INVALID_DIGIT)
    if payer_id < 0:
        raise InvalidIdentifierNumber(InvalidIdentifierNumber.NEGATIVE)
    return payer_id


def _check_check_digit(check_digit: int) -> int:
    # Same range as a parsed check digit segment
    if isinstance(check_digit, bool) or not isinstance(check_digit, int):
        raise InvalidCheckDigit(str(check_digit))
    if not 0 <= check_digit <= MAX_CHECK_DIGIT_VALUE:
        raise InvalidCheckDigit(str(check_digit))
    return check_digit


def compute_check_digit(category: Category, payer_id: int) -> int:
    """
    Compute the check digit for a category and payer id.

    The payer id is padded to 9 digits. The first slot is replaced by the
    category weight times 4 and the remaining 8 digits are weighted by
    3, 2, 7, 6, 5, 4, 3, 2. The digit is 11 minus the sum modulo 11,
    with 10 and 11 folded to 0.

    Example:
        >>> compute_check_digit(Category.LEGAL, 7013380)
        5

    Raises:
        InvalidCategory: If category is neither a Category nor a known code
        InvalidIdentifierNumber: If payer_id is not a non-negative int
    """
    category = _check_category(category)
    payer_id = _check_payer_id(payer_id)

    # Only the lowest 9 digits take part in the sum
    digits = [int(d) for d in f"{payer_id:0{PAYER_ID_LENGTH}d}"[-PAYER_ID_LENGTH:]]

    total = category.weight * CATEGORY_MULTIPLIER
    total += sum(d * m for d, m in zip(digits[1:], SLOT_MULTIPLIERS))

    check_digit = 11 - total % 11
    if check_digit > 9:
        return 0
    return check_digit


def _parse_check_digit(segment: str) -> int:
    if not _DIGITS.fullmatch(segment):
        raise InvalidCheckDigit(segment)
    value = int(segment)
    if value > MAX_CHECK_DIGIT_VALUE:
        raise InvalidCheckDigit(segment)
    return value


def _parse_payer_id(segment: str) -> int:
    if not segment:
        raise InvalidIdentifierNumber(InvalidIdentifierNumber.EMPTY)
    if not _DIGITS.fullmatch(segment):
        raise InvalidIdentifierNumber(InvalidIdentifierNumber.INVALID_DIGIT)
    value = int(segment)
    if value > MAX_PAYER_ID:
        raise InvalidIdentifierNumber(InvalidIdentifierNumber.TOO_LARGE)
    return value


@dataclass(frozen=True)
class Rif:
    """
    A validated Venezuelan fiscal identifier.

    Constructing a Rif directly checks the supplied check digit:

        >>> rif = Rif(Category.LEGAL, 7013380, 5)
        >>> str(rif)
        'J-07013380-5'

    A single-letter code is accepted in place of a Category and resolved
    with Category.parse.

    Raises:
        InvalidCategory: If category is not a Category or a known code
        InvalidIdentifierNumber: If payer_id is negative or longer than 9 digits
        InvalidCheckDigit: If check_digit is not an int in 0..255
        UnexpectedCheckDigit: If check_digit does not match the computed one
    """
    category: Category
    payer_id: int
    check_digit: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", _check_category(self.category))
        _check_payer_id(self.payer_id)
        if self.payer_id > MAX_PAYER_ID:
            raise InvalidIdentifierNumber(InvalidIdentifierNumber.TOO_LARGE)
        _check_check_digit(self.check_digit)

        expected = compute_check_digit(self.category, self.payer_id)
        if self.check_digit != expected:
            raise UnexpectedCheckDigit(expected, self.check_digit)

    @classmethod
    def new(cls, category: Category, payer_id: int, check_digit: int) -> "Rif":
        """Build a Rif from its parts, verifying the check digit."""
        return cls(category, payer_id, check_digit)

    @classmethod
    def parse(cls, value: str) -> "Rif":
        """
        Parse and validate a RIF string such as "J-07013380-5".

        Segments are checked in this order: segment count, check digit,
        category, payer id, and finally the checksum itself.

        Args:
            value: RIF string with three dash-separated segments

        Returns:
            The validated Rif

        Raises:
            InvalidIdentifier: If the string does not have 3 segments
            InvalidCheckDigit: If the last segment is not a number
            InvalidCategory: If the first segment is not a known code
            InvalidIdentifierNumber: If the middle segment is not a number
            UnexpectedCheckDigit: If the check digit does not match
        """
        try:
            parts = value.split(SEPARATOR)
            if len(parts) != 3:
                raise InvalidIdentifier(
                    "must be split into 3 dash-separated parts, "
                    f"e.g. J-123456789-1; got: {value}"
                )

            code, number, digit = parts
            check_digit = _parse_check_digit(digit)
            category = Category.parse(code)
            payer_id = _parse_payer_id(number)

            expected = compute_check_digit(category, payer_id)
            if expected != check_digit:
                raise UnexpectedCheckDigit(expected, check_digit)
        except RifError as e:
            logger.debug(f"Rejected RIF {value!r}: {e}")
            raise

        return cls(category, payer_id, check_digit)

    from_str = parse

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Return True if value parses as a valid RIF."""
        try:
            cls.parse(value)
        except RifError:
            return False
        return True

    compute_check_digit = staticmethod(compute_check_digit)

    def to_string(self) -> str:
        return (
            f"{self.category.to_code()}{SEPARATOR}"
            f"{self.payer_id:0{DISPLAY_WIDTH}d}{SEPARATOR}"
            f"{self.check_digit}"
        )

    def __str__(self) -> str:
        return self.to_string()
