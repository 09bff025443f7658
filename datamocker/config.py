"""Configuration settings and loading."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from datamocker.tables.addresses import COUNTRY_PROFILES
from datamocker.tables.phones import PHONE_PROFILES
from datamocker.tables.words import PERSONAL_DOMAINS
from datamocker.types import Gender, NameFormat, Region

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class MockerConfig(BaseSettings):
    """Defaults applied by a DataMocker when a call leaves them out."""

    model_config = SettingsConfigDict(
        env_prefix="DATAMOCKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    locale: str = "en_US"
    seed: int | None = None
    default_region: Region = Region.WESTERN
    default_gender: Gender = Gender.UNSPECIFIED
    default_name_format: NameFormat = NameFormat.FIRST_LAST
    default_address_country: str = "US"
    default_phone_country: str = "NG"
    personal_domains: list[str] = Field(default_factory=lambda: list(PERSONAL_DOMAINS))
    log_level: str = "WARNING"
    json_logs: bool = False

    @field_validator("default_region", "default_gender", "default_name_format", mode="before")
    @classmethod
    def validate_enum_tag(cls, v: Any) -> Any:
        # accept "NIGERIAN" as well as "nigerian"
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("default_address_country", mode="before")
    @classmethod
    def validate_address_country(cls, v: str) -> str:
        code = str(v).strip().upper()
        if code not in COUNTRY_PROFILES:
            raise ValueError(
                f"Unsupported address country: {v}. Valid: {sorted(COUNTRY_PROFILES)}"
            )
        return code

    @field_validator("default_phone_country", mode="before")
    @classmethod
    def validate_phone_country(cls, v: str) -> str:
        code = str(v).strip().upper()
        if code not in PHONE_PROFILES:
            raise ValueError(f"Unsupported phone country: {v}. Valid: {sorted(PHONE_PROFILES)}")
        return code

    @field_validator("personal_domains", mode="before")
    @classmethod
    def validate_personal_domains(cls, v: Any) -> list[str]:
        if isinstance(v, str):
            # env values arrive as JSON lists, file values may be "a.com, b.com"
            if v.strip().startswith("["):
                v = json.loads(v)
            else:
                v = [part.strip() for part in v.split(",") if part.strip()]
        if not v:
            raise ValueError("personal_domains must not be empty")
        invalid = [domain for domain in v if "." not in domain]
        if invalid:
            raise ValueError(f"Invalid personal domains (missing a TLD): {invalid}")
        return list(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Valid: {sorted(LOG_LEVELS)}")
        return level


def load_config(config_path: str | Path | None = None) -> MockerConfig:
    """Load configuration from a YAML file and the environment.

    Priority: env vars > config file > defaults
    """
    config_data: dict[str, Any] = {}

    if config_path is not None:
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path) as f:
                config_data = yaml.safe_load(f) or {}

    config_data.update(_get_env_overrides())

    return MockerConfig(**config_data)


def _get_env_overrides() -> dict[str, Any]:
    """Collect DATAMOCKER_* variables that should win over the config file."""
    overrides: dict[str, Any] = {}
    prefix = MockerConfig.model_config.get("env_prefix", "")

    for field_name in MockerConfig.model_fields:
        value = os.environ.get(f"{prefix}{field_name}".upper())
        if value is not None:
            overrides[field_name] = value

    return overrides
