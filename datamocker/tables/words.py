"""Word pools, character sets and domain lists."""

from __future__ import annotations

import string
from types import MappingProxyType

ALPHABET_UPPER = string.ascii_uppercase
ALPHABET_LOWER = string.ascii_lowercase
DIGITS = string.digits
SPECIAL_CHARS = "!@#$%^&*()_+-=[]{}|;':,.<>?"
HEX_CHARS = "0123456789ABCDEF"
ALPHANUMERIC = ALPHABET_UPPER + ALPHABET_LOWER + DIGITS
ALL_CHARS = ALPHANUMERIC + SPECIAL_CHARS

USERNAME_SPECIAL_CHARS = "._-"

LOREM_WORDS: tuple[str, ...] = (
    "lorem", "ipsum", "dolor", "sit", "amet", "consectetur", "adipiscing", "elit", "sed", "do",
    "eiusmod", "tempor", "incididunt", "ut", "labore", "et", "dolore", "magna", "aliqua",
)

FOLDERS: tuple[str, ...] = ("documents", "pictures", "downloads", "music", "videos")
FILE_EXTENSIONS: tuple[str, ...] = ("txt", "pdf", "csv", "json", "png")

TOP_LEVEL_DOMAINS: tuple[str, ...] = ("com", "net", "org", "io", "co", "ai")

ADJECTIVES: tuple[str, ...] = (
    "Cool", "Smart", "Fast", "Brave", "Witty", "Mighty", "Fierce", "Bold", "Sly", "Energetic",
)
NOUNS: tuple[str, ...] = (
    "Tiger", "Eagle", "Shark", "Panther", "Wolf", "Dragon", "Falcon", "Cheetah", "Viper", "Hawk",
)

PERSONAL_DOMAINS: tuple[str, ...] = (
    "gmail.com", "yahoo.com", "outlook.com", "hotmail.com", "example.com",
)
BUSINESS_PREFIXES: tuple[str, ...] = ("contact", "info", "sales", "support", "admin")
BUSINESS_TLDS: tuple[str, ...] = ("com", "org", "net", "co.uk", "ng", "ca", "de", "fr", "jp")

COUNTRY_TLDS: MappingProxyType[str, str] = MappingProxyType(
    {"UK": "co.uk", "NG": "ng", "CA": "ca", "DE": "de", "FR": "fr", "JP": "jp"}
)
DEFAULT_TLD = "com"
