"""Shared fixtures for configuration printer unit tests."""

# pylint: disable=invalid-name

from dataclasses import dataclass, field
from typing import Any

import pytest
from pydantic import BaseModel, Field, SecretStr

from confprint import safe_field

LONG_API_KEY = "very-long-secret-key-123"
SHORT_SECRET = "short-secret"
ENVIRONMENT = "development"
PORT = 8080


@dataclass
class SampleConfig:
    """Dataclass record covering explicit, missing and safe annotations."""

    APIKey: str = field(default="", metadata={"safe": False})
    Port: int = safe_field(default=0)
    SecretKey: str = ""
    Environment: str = safe_field(default="")


class SampleModel(BaseModel):
    """Pydantic record equivalent to SampleConfig."""

    APIKey: SecretStr = Field(default=SecretStr(""), json_schema_extra={"safe": False})
    Port: int = Field(default=0, json_schema_extra={"safe": True})
    SecretKey: str = ""
    Environment: str = Field(default="", json_schema_extra={"safe": "true"})


def build_sample_config(**overrides: Any) -> SampleConfig:
    """Build a populated SampleConfig, optionally overriding some fields."""
    values: dict[str, Any] = {
        "APIKey": LONG_API_KEY,
        "Port": PORT,
        "SecretKey": SHORT_SECRET,
        "Environment": ENVIRONMENT,
    }
    values.update(overrides)
    return SampleConfig(**values)


@pytest.fixture(name="sample_config")
def sample_config_fixture() -> SampleConfig:
    """Populated dataclass record."""
    return build_sample_config()


@pytest.fixture(name="sample_model")
def sample_model_fixture() -> SampleModel:
    """Populated pydantic record."""
    return SampleModel(
        APIKey=SecretStr(LONG_API_KEY),
        Port=PORT,
        SecretKey=SHORT_SECRET,
        Environment=ENVIRONMENT,
    )


@pytest.fixture(name="config_builder")
def config_builder_fixture() -> Any:
    """Factory for populated dataclass records."""
    return build_sample_config
