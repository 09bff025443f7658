"""Built-in generators, one per data category."""

from datamocker.providers.address import AddressProvider
from datamocker.providers.base import MockProvider
from datamocker.providers.company import CompanyProvider
from datamocker.providers.date import DateProvider
from datamocker.providers.email import EmailProvider
from datamocker.providers.name import NameProvider
from datamocker.providers.number import NumberProvider
from datamocker.providers.phone import PhoneNumberProvider
from datamocker.providers.string import StringProvider
from datamocker.providers.username import UsernameProvider

__all__ = [
    "AddressProvider",
    "CompanyProvider",
    "DateProvider",
    "EmailProvider",
    "MockProvider",
    "NameProvider",
    "NumberProvider",
    "PhoneNumberProvider",
    "StringProvider",
    "UsernameProvider",
]
