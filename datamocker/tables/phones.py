"""Per-country phone numbering profiles."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from datamocker.errors import DataTableError

# Display template placeholder for one digit
DIGIT_SLOT = "X"


@dataclass(frozen=True)
class PhoneCountryProfile:
    """Dialing prefix, local number length and valid leading digits."""

    code: str
    international_prefix: str
    number_length: int
    mobile_prefixes: tuple[str, ...]
    landline_prefixes: tuple[str, ...]
    display_template: str

    def __post_init__(self) -> None:
        if not self.international_prefix.startswith("+"):
            raise DataTableError(f"{self.code}: international prefix must start with '+'")
        if not self.mobile_prefixes or not self.landline_prefixes:
            raise DataTableError(f"{self.code}: prefix lists must not be empty")
        for prefix in self.mobile_prefixes + self.landline_prefixes:
            if not prefix.isdigit() or len(prefix) >= self.number_length:
                raise DataTableError(
                    f"{self.code}: prefix {prefix!r} must be digits and shorter than "
                    f"{self.number_length}"
                )
        if DIGIT_SLOT not in self.display_template:
            raise DataTableError(f"{self.code}: display template has no digit slots")

    @property
    def dialing_digits(self) -> str:
        """International prefix without the leading ``+``."""
        return self.international_prefix.lstrip("+")


PHONE_PROFILES: MappingProxyType[str, PhoneCountryProfile] = MappingProxyType(
    {
        "US": PhoneCountryProfile(
            "US", "+1", 10, ("2", "3", "4", "5", "6", "7", "8", "9"), ("1",), "(XXX) XXX-XXXX"
        ),
        "CA": PhoneCountryProfile(
            "CA", "+1", 10, ("2", "3", "4", "5", "6", "7", "8", "9"), ("1",), "(XXX) XXX-XXXX"
        ),
        "UK": PhoneCountryProfile("UK", "+44", 10, ("7",), ("1", "2", "3"), "XXXX XXX XXXX"),
        "FR": PhoneCountryProfile(
            "FR", "+33", 9, ("6", "7"), ("1", "2", "3", "4", "5"), "X XX XX XX XX"
        ),
        "DE": PhoneCountryProfile(
            "DE", "+49", 10, ("15", "16", "17"), ("2", "3", "4", "5", "6", "7", "8", "9"),
            "XXXX-XXXXXXX",
        ),
        "NG": PhoneCountryProfile(
            "NG", "+234", 10, ("70", "80", "81", "90", "91"), ("1", "2", "7"), "XXX XXX XXXX"
        ),
        "ZA": PhoneCountryProfile("ZA", "+27", 9, ("6", "7", "8"), ("1", "2"), "XX XXX XXXX"),
        "IN": PhoneCountryProfile(
            "IN", "+91", 10, ("7", "8", "9"), ("1", "2", "3", "4", "5"), "XXXXX-XXXXX"
        ),
        "CN": PhoneCountryProfile(
            "CN", "+86", 11, ("13", "15", "18"), ("10", "20", "21", "22", "23", "24"),
            "XXX-XXXX-XXXX",
        ),
    }
)

# Toll-free and premium-rate numbers use fixed conventional prefixes
NORTH_AMERICA = frozenset({"US", "CA"})
TOLL_FREE_PREFIX = {"north_america": "800", "other": "0800"}
PREMIUM_RATE_PREFIX = {"north_america": "900", "other": "0900"}
