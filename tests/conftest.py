"""Pytest fixtures for datamocker tests."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator
from datetime import date

import pytest
from faker import Faker

from datamocker import DataMocker, MockerConfig
from datamocker.random_source import RandomSource

FIXED_TODAY = date(2024, 6, 15)

ITERATIONS = 200


def fixed_clock() -> date:
    return FIXED_TODAY


@pytest.fixture
def faker() -> Faker:
    generator = Faker("en_US")
    generator.seed_instance(1234)
    return generator


@pytest.fixture
def rng() -> RandomSource:
    return RandomSource(random.Random(1234))


@pytest.fixture
def mocker() -> DataMocker:
    """Seeded mocker whose "today" is pinned to FIXED_TODAY."""
    return DataMocker(MockerConfig(seed=1234), clock=fixed_clock)


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo configure_logging so caplog sees records from every test."""
    yield
    logger = logging.getLogger("datamocker")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
