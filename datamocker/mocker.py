"""DataMocker facade: one typed accessor per data category.

Example:
    >>> from datamocker import mock
    >>> mock.name.nigerian()
    'Chinedu Okafor'
    >>> mock.number.prime(1, 100)
    61

    >>> # Seeded generation for reproducibility
    >>> from datamocker import DataMocker, MockerConfig
    >>> mocker = DataMocker(MockerConfig(seed=12345))
    >>> first = mocker.email.personal()
    >>> mocker.reset_seed()
    >>> assert mocker.email.personal() == first

    >>> # Swap in a test double for one category
    >>> mocker = DataMocker(providers={"company": FixedCompanyProvider()})
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from datetime import date
from typing import Any

from faker import Faker

from datamocker.config import MockerConfig
from datamocker.providers import (
    AddressProvider,
    CompanyProvider,
    DateProvider,
    EmailProvider,
    NameProvider,
    NumberProvider,
    PhoneNumberProvider,
    StringProvider,
    UsernameProvider,
)
from datamocker.random_source import RandomSource
from datamocker.registry import ProviderFactory, ProviderRegistry


class DataMocker:
    """Facade over a registry of providers sharing one random source.

    Args:
        config: Defaults for region, countries, seed and locale.
        providers: Replacement providers keyed by registry key. Keys that are
            not built in are registered too and reachable through
            :meth:`provider`.
        clock: Source of "today" for date generation.
    """

    def __init__(
        self,
        config: MockerConfig | None = None,
        providers: Mapping[str, Any] | None = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self.config = config if config is not None else MockerConfig()
        self.seed = self.config.seed
        self._original_seed = self.seed
        self._clock = clock
        self._faker = Faker(self.config.locale)
        # always seeded so the generator owns a private random.Random
        self._faker.seed_instance(self.seed)
        self.random_source = RandomSource(self._faker.random)
        self.registry = ProviderRegistry.build(self._default_factories(), providers)

    def _default_factories(self) -> dict[str, ProviderFactory]:
        faker, rng, config = self._faker, self.random_source, self.config
        return {
            "name": lambda _: NameProvider(
                faker,
                rng,
                default_region=config.default_region,
                default_gender=config.default_gender,
                default_name_format=config.default_name_format,
            ),
            "date": lambda _: DateProvider(faker, rng, clock=self._clock),
            "number": lambda _: NumberProvider(faker, rng),
            "address": lambda _: AddressProvider(
                faker, rng, default_country=config.default_address_country
            ),
            "phone_number": lambda _: PhoneNumberProvider(
                faker, rng, default_country=config.default_phone_country
            ),
            "company": lambda _: CompanyProvider(faker, rng),
            "string": lambda _: StringProvider(faker, rng),
            "username": lambda resolved: UsernameProvider(faker, rng, names=resolved["name"]),
            "email": lambda resolved: EmailProvider(
                faker,
                rng,
                names=resolved["name"],
                companies=resolved["company"],
                personal_domains=config.personal_domains,
            ),
        }

    @property
    def name(self) -> NameProvider:
        return self.registry.get("name")

    @property
    def date(self) -> DateProvider:
        return self.registry.get("date")

    @property
    def number(self) -> NumberProvider:
        return self.registry.get("number")

    @property
    def username(self) -> UsernameProvider:
        return self.registry.get("username")

    @property
    def address(self) -> AddressProvider:
        return self.registry.get("address")

    @property
    def phone_number(self) -> PhoneNumberProvider:
        return self.registry.get("phone_number")

    @property
    def company(self) -> CompanyProvider:
        return self.registry.get("company")

    @property
    def string(self) -> StringProvider:
        return self.registry.get("string")

    @property
    def email(self) -> EmailProvider:
        return self.registry.get("email")

    def provider(self, key: str) -> Any:
        """Look up any registered provider, including custom keys.

        Raises:
            ProviderNotFoundError: If ``key`` is not registered.
        """
        return self.registry.get(key)

    def set_seed(self, seed: int) -> None:
        """Reseed the shared random source."""
        self.seed = seed
        self._original_seed = seed
        self._faker.seed_instance(seed)

    def reset_seed(self) -> None:
        """Rewind to the original seed for reproducible generation."""
        if self._original_seed is not None:
            self._faker.seed_instance(self._original_seed)

    @contextmanager
    def seeded(self, seed: int) -> Iterator[DataMocker]:
        """Temporarily generate from ``seed``.

        On exit the previous seed is restored and rewound. Without a previous
        seed the source is reseeded from system entropy.
        """
        old_seed = self.seed
        self.set_seed(seed)
        try:
            yield self
        finally:
            if old_seed is not None:
                self.set_seed(old_seed)
            else:
                self.seed = None
                self._original_seed = None
                self._faker.seed_instance(None)


def create_mocker(
    seed: int | None = None,
    providers: Mapping[str, Any] | None = None,
    **settings: Any,
) -> DataMocker:
    """Build a DataMocker from keyword settings.

    Example:
        >>> mocker = create_mocker(seed=7, default_region="nigerian")
    """
    return DataMocker(MockerConfig(seed=seed, **settings), providers=providers)


# Default global instance for convenience
mock = DataMocker()
