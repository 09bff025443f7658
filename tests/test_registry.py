"""Tests for the provider registry."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from datamocker.errors import InvalidArgumentError, ProviderNotFoundError
from datamocker.registry import ProviderRegistry


class Stub:
    def __init__(self, label: str) -> None:
        self.label = label


def defaults() -> dict[str, Any]:
    return {
        "name": lambda resolved: Stub("builtin-name"),
        "email": lambda resolved: Stub(f"email-using-{resolved['name'].label}"),
    }


class TestBuild:
    """Tests for combining built-ins with overrides."""

    def test_builtins_fill_every_key(self) -> None:
        registry = ProviderRegistry.build(defaults())
        assert registry.keys() == ["name", "email"]
        assert registry.get("name").label == "builtin-name"

    def test_override_wins(self) -> None:
        registry = ProviderRegistry.build(defaults(), {"name": Stub("custom")})
        assert registry.get("name").label == "custom"

    def test_factories_see_overrides(self) -> None:
        registry = ProviderRegistry.build(defaults(), {"name": Stub("custom")})
        assert registry.get("email").label == "email-using-custom"

    def test_extra_keys_are_registered(self) -> None:
        registry = ProviderRegistry.build(defaults(), {"vehicle": Stub("car")})
        assert "vehicle" in registry
        assert len(registry) == 3

    def test_overridden_factory_is_not_called(self) -> None:
        calls: list[str] = []

        def factory(resolved: Mapping[str, Any]) -> Stub:
            calls.append("called")
            return Stub("builtin")

        ProviderRegistry.build({"name": factory}, {"name": Stub("custom")})
        assert calls == []

    def test_rejects_bad_overrides(self) -> None:
        with pytest.raises(InvalidArgumentError):
            ProviderRegistry.build(defaults(), {"": Stub("x")})
        with pytest.raises(InvalidArgumentError):
            ProviderRegistry.build(defaults(), {"name": None})


class TestLookup:
    """Tests for lookups on a built registry."""

    def test_missing_key_raises(self) -> None:
        registry = ProviderRegistry.build(defaults())
        with pytest.raises(ProviderNotFoundError) as exc_info:
            registry.get("weather")
        assert exc_info.value.key == "weather"
        assert exc_info.value.available == ["email", "name"]
        assert "No provider found for: weather" in str(exc_info.value)

    def test_mapping_is_read_only(self) -> None:
        registry = ProviderRegistry.build(defaults())
        with pytest.raises(TypeError):
            registry.as_mapping()["name"] = Stub("late")  # type: ignore[index]

    def test_iteration(self) -> None:
        registry = ProviderRegistry.build(defaults())
        assert list(registry) == ["name", "email"]
