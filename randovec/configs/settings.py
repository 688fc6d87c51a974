"""
Unified application settings.

Aggregates all configuration modules into a single Settings class and turns
pydantic validation failures into ConfigError.

Dependencies: All config modules, pydantic
System role: Central configuration aggregator for the application
"""

from typing import Any

from pydantic import ValidationError
from pydantic_settings import BaseSettings as PydanticBaseSettings

from randovec.configs.base import BaseSettings
from randovec.configs.seeding import SeedingSettings
from randovec.configs.weaviate import WeaviateSettings
from randovec.core.exceptions import ConfigError


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    weaviate: WeaviateSettings
    seeding: SeedingSettings


def _env_name(model_cls: type[PydanticBaseSettings], loc: Any) -> str:
    """Map a validation error location back to its environment variable."""
    prefix = model_cls.model_config.get("env_prefix", "")
    for name, info in model_cls.model_fields.items():
        alias = info.validation_alias if isinstance(info.validation_alias, str) else None
        if str(loc).lower() in (name, (alias or "").lower()):
            return (alias or f"{prefix}{name}").upper()
    return str(loc).upper()


def _config_error(exc: ValidationError, model_cls: type[PydanticBaseSettings]) -> ConfigError:
    """Build a ConfigError naming the first offending environment variable."""
    first = exc.errors()[0]
    field = _env_name(model_cls, first["loc"][0]) if first.get("loc") else None

    if first.get("type") == "missing":
        message = f"required environment variable is not set: {field}"
    else:
        message = f"invalid value for {field}: {first.get('msg')}"

    return ConfigError(
        message,
        field=field,
        details={"error_count": exc.error_count()},
    )


def load_settings(**seeding_overrides: Any) -> Settings:
    """
    Read and validate settings from the environment.

    Args:
        **seeding_overrides: Run parameters that take precedence over the
            environment (num_objects, batch_size, vector_size). None values
            are ignored.

    Returns:
        Settings: Validated settings

    Raises:
        ConfigError: Required variable missing or a value failed validation
    """
    overrides = {k: v for k, v in seeding_overrides.items() if v is not None}
    try:
        weaviate = WeaviateSettings()
    except ValidationError as e:
        raise _config_error(e, WeaviateSettings) from e
    try:
        seeding = SeedingSettings(**overrides)
    except ValidationError as e:
        raise _config_error(e, SeedingSettings) from e

    return Settings(weaviate=weaviate, seeding=seeding)
