"""Key-to-provider map built once per DataMocker."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from datamocker.errors import InvalidArgumentError, ProviderNotFoundError

logger = logging.getLogger(__name__)

# Receives the providers resolved so far, so composite providers can reuse them
ProviderFactory = Callable[[Mapping[str, Any]], Any]


class ProviderRegistry:
    """Read-only mapping from provider key to provider instance.

    The map is fixed at construction. Use :meth:`build` to combine built-in
    factories with caller overrides.
    """

    def __init__(self, providers: Mapping[str, Any]) -> None:
        self._providers: MappingProxyType[str, Any] = MappingProxyType(dict(providers))

    @classmethod
    def build(
        cls,
        defaults: Mapping[str, ProviderFactory],
        overrides: Mapping[str, Any] | None = None,
    ) -> ProviderRegistry:
        """Install ``overrides`` first, then fill every missing key from ``defaults``.

        Factories run in ``defaults`` order and see everything resolved before
        them, so a factory may compose providers registered under earlier keys.

        Raises:
            InvalidArgumentError: If an override key is empty or an override is None.
        """
        resolved: dict[str, Any] = {}
        for key, provider in (overrides or {}).items():
            if not isinstance(key, str) or not key.strip():
                raise InvalidArgumentError("Provider key must be a non-empty string", key=key)
            if provider is None:
                raise InvalidArgumentError(f"Provider for '{key}' must not be None", key=key)
            resolved[key] = provider

        for key, factory in defaults.items():
            if key not in resolved:
                resolved[key] = factory(resolved)

        if overrides:
            logger.debug("Built registry with overrides for: %s", ", ".join(sorted(overrides)))
        return cls(resolved)

    def get(self, key: str) -> Any:
        """Return the provider under ``key``.

        Raises:
            ProviderNotFoundError: If nothing is registered under ``key``.
        """
        try:
            return self._providers[key]
        except KeyError:
            raise ProviderNotFoundError(key, available=list(self._providers)) from None

    def keys(self) -> list[str]:
        return list(self._providers)

    def as_mapping(self) -> MappingProxyType[str, Any]:
        return self._providers

    def __contains__(self, key: object) -> bool:
        return key in self._providers

    def __iter__(self) -> Iterator[str]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)
