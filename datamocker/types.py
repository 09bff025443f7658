"""Enumerated tags used to select lookup tables."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from datamocker.errors import InvalidArgumentError

E = TypeVar("E", bound=Enum)


class Region(Enum):
    """Cultural regions with their own name and title tables."""

    NIGERIAN = "nigerian"
    ARABIC = "arabic"
    WESTERN = "western"
    ASIAN = "asian"
    EUROPEAN = "european"


class Gender(Enum):
    """Gender used to pick a first-name table.

    UNSPECIFIED resolves to the female table.
    """

    MALE = "male"
    FEMALE = "female"
    UNSPECIFIED = "unspecified"


class NameFormat(Enum):
    """Shape of a composed name."""

    FIRST_LAST = "first_last"  # "John Doe"
    LAST_FIRST = "last_first"  # "Doe, John"
    FIRST_MIDDLE_LAST = "first_middle_last"  # "John Michael Doe"
    TITLE_FIRST_LAST = "title_first_last"  # "Mr. John Doe"


class Continent(Enum):
    AFRICA = "africa"
    AMERICA = "america"
    EUROPE = "europe"
    ASIA = "asia"
    AUSTRALIA = "australia"
    GLOBAL = "global"


class Industry(Enum):
    TECH = "tech"
    RETAIL = "retail"
    MANUFACTURING = "manufacturing"
    FINANCE = "finance"
    GLOBAL = "global"


class Season(Enum):
    """Meteorological seasons (northern hemisphere)."""

    WINTER = 1
    SPRING = 2
    SUMMER = 3
    FALL = 4


class PhoneKind(Enum):
    MOBILE = "mobile"
    LANDLINE = "landline"


def parse_enum(enum_cls: type[E], value: E | str | int, label: str | None = None) -> E:
    """Coerce an enum member, its value, or its name into ``enum_cls``.

    Raises:
        InvalidArgumentError: If ``value`` does not name a member.
    """
    if isinstance(value, enum_cls):
        return value
    label = label or enum_cls.__name__
    if value is None:
        raise InvalidArgumentError(f"{label} must not be None")
    if isinstance(value, str):
        key = value.strip()
        for member in enum_cls:
            if key.upper() == member.name or key.lower() == str(member.value):
                return member
    else:
        try:
            return enum_cls(value)
        except ValueError:
            pass
    choices = ", ".join(m.name.lower() for m in enum_cls)
    raise InvalidArgumentError(
        f"Unsupported {label}: {value!r}. Supported: {choices}",
        value=value,
    )
