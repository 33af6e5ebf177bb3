"""
Error taxonomy for RIF parsing and validation.

Every failure raised by this package is a subclass of RifError, which
itself is a ValueError so callers can catch it alongside other bad-input
errors. Errors are plain data: two errors compare equal when they have
the same type and the same arguments.
"""


class RifError(ValueError):
    """Base class for every RIF validation failure."""

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))

    def __repr__(self) -> str:
        args = ", ".join(repr(arg) for arg in self.args)
        return f"{type(self).__name__}({args})"


class InvalidCategory(RifError):
    """The category segment is not one of the known codes."""

    def __init__(self, raw: str) -> None:
        super().__init__(raw)
        self.raw = raw

    def __str__(self) -> str:
        return (
            f"Invalid RIF category provided, {self.raw}. "
            'Expected one of "C, E, G, J, P, V"'
        )


class InvalidIdentifier(RifError):
    """The RIF string does not have the expected overall shape."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Invalid RIF. {self.message}"


class InvalidIdentifierNumber(RifError):
    """The payer id is not a non-negative integer of at most 9 digits."""

    EMPTY = "cannot parse integer from empty string"
    INVALID_DIGIT = "invalid digit found in string"
    TOO_LARGE = "number too large to fit in target type"
    NEGATIVE = "number must not be negative"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Invalid RIF identifier number. {self.message}"


class InvalidCheckDigit(RifError):
    """The check digit segment is not an unsigned byte-sized number."""

    def __init__(self, raw: str) -> None:
        super().__init__(raw)
        self.raw = raw

    def __str__(self) -> str:
        return f"The provided check digit is not a valid digit. Received: {self.raw}"


class UnexpectedCheckDigit(RifError):
    """The check digit is well formed but does not match the computed one."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return (
            f"Invalid check digit provided, expected {self.expected} "
            f"and received {self.actual}"
        )
