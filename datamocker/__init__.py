"""datamocker - randomized, plausible mock data for tests and demos.

Generators cover names, dates, numbers, usernames, addresses, phone numbers,
companies, strings and emails. They are reached through a DataMocker facade
that resolves each category from a provider registry.

Example:
    >>> from datamocker import mock
    >>> mock.name.name(region="nigerian", name_format="title_first_last")
    'Chief Emeka Okafor'
    >>> mock.phone_number.formatted("US")
    '(415) 555-0132'

    >>> from datamocker import create_mocker
    >>> mocker = create_mocker(seed=42, default_address_country="UK")
    >>> mocker.address.with_apartment()
    '17 Church Road Apt 4B, Manchester, 45TQ 7HL'
"""

from datamocker.config import MockerConfig, load_config
from datamocker.errors import (
    DataMockerError,
    DataTableError,
    ErrorCode,
    InvalidArgumentError,
    InvalidRangeError,
    ProviderError,
    ProviderNotFoundError,
    ValidationError,
)
from datamocker.mocker import DataMocker, create_mocker, mock
from datamocker.providers import (
    AddressProvider,
    CompanyProvider,
    DateProvider,
    EmailProvider,
    MockProvider,
    NameProvider,
    NumberProvider,
    PhoneNumberProvider,
    StringProvider,
    UsernameProvider,
)
from datamocker.random_source import RandomSource, default_random_source
from datamocker.registry import ProviderRegistry
from datamocker.types import Continent, Gender, Industry, NameFormat, PhoneKind, Region, Season

__version__ = "0.1.0"

__all__ = [
    "AddressProvider",
    "CompanyProvider",
    "Continent",
    "DataMocker",
    "DataMockerError",
    "DataTableError",
    "DateProvider",
    "EmailProvider",
    "ErrorCode",
    "Gender",
    "Industry",
    "InvalidArgumentError",
    "InvalidRangeError",
    "MockProvider",
    "MockerConfig",
    "NameFormat",
    "NameProvider",
    "NumberProvider",
    "PhoneKind",
    "PhoneNumberProvider",
    "ProviderError",
    "ProviderNotFoundError",
    "ProviderRegistry",
    "RandomSource",
    "Region",
    "Season",
    "StringProvider",
    "UsernameProvider",
    "ValidationError",
    "create_mocker",
    "default_random_source",
    "load_config",
    "mock",
    "__version__",
]
