"""
RIF category: the kind of holder a fiscal identifier belongs to.

The first segment of a RIF is a single letter:

- C: Township or communal council
- E: Foreign natural person ("Extranjero")
- G: Government entity ("Gubernamental")
- J: Legal entity ("Jurídico"), a company or a natural person acting as one
- P: Passport holder
- V: Venezuelan citizen ("Venezolano")

Each category also carries the weight that seeds the check digit sum.
"""

from enum import Enum

from .errors import InvalidCategory


class Category(Enum):
    """Holder category of a RIF. Member values are the canonical codes."""
    TOWNSHIP = "C"
    FOREIGNER = "E"
    GOVERNMENT = "G"
    LEGAL = "J"
    PASSPORT = "P"
    VENEZUELAN = "V"

    @classmethod
    def parse(cls, code: str) -> "Category":
        """
        Resolve a category from its single-letter code, ignoring case.

        Raises:
            InvalidCategory: If the code is not one of C, E, G, J, P, V
        """
        if not isinstance(code, str) or len(code) != 1:
            raise InvalidCategory(code)
        try:
            return cls(code.upper())
        except ValueError:
            raise InvalidCategory(code) from None

    def to_code(self) -> str:
        return self.value

    @property
    def weight(self) -> int:
        """
        Weight used in place of the first digit of the checksum sum.

        Exposed as a property rather than a weight() method since it is a
        fixed attribute of each member.
        """
        match self:
            case Category.VENEZUELAN:
                return 1
            case Category.FOREIGNER:
                return 2
            case Category.LEGAL | Category.TOWNSHIP:
                return 3
            case Category.PASSPORT:
                return 4
            case Category.GOVERNMENT:
                return 5

    @property
    def description(self) -> str:
        match self:
            case Category.TOWNSHIP:
                return "Township or communal council"
            case Category.FOREIGNER:
                return "Foreign natural person"
            case Category.GOVERNMENT:
                return "Government entity"
            case Category.LEGAL:
                return "Legal entity"
            case Category.PASSPORT:
                return "Passport holder"
            case Category.VENEZUELAN:
                return "Venezuelan citizen"

    def __str__(self) -> str:
        return self.value
