"""Configuration system for allele-log.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (ALLELE_LOG_*) -> .env file -> field defaults.

Overrides are applied via resolve_config() which creates a new config
instance without mutating the defaults.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from allele_log.exceptions import ConfigValidationError

LogLevel = Literal["none", "summary", "full"]


class AlleleLogConfig(BaseSettings):
    """Configuration for allele-log.

    Resolution order: init kwargs -> env vars (ALLELE_LOG_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="ALLELE_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: LogLevel = Field(
        default="none",
        description="Append logging verbosity: 'none', 'summary', 'full'",
    )
    check_invariants: bool = Field(
        default=False,
        description="Warn when an appended record breaks a producer invariant",
    )


def resolve_config(
    defaults: AlleleLogConfig,
    overrides: dict[str, Any] | None,
) -> AlleleLogConfig:
    """Create a new config instance merging defaults with overrides.

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Field values to replace, keyed by field name.

    Returns:
        A new AlleleLogConfig with overrides applied, or *defaults* itself
        when there is nothing to override.

    Raises:
        ConfigValidationError: If any key is not a configuration field.
    """
    if not overrides:
        return defaults

    known = AlleleLogConfig.model_fields.keys()
    for key in overrides:
        if key not in known:
            raise ConfigValidationError(f"Unknown config field: '{key}'")

    # model_validate (not model_copy) so values are coerced and checked.
    merged = defaults.model_dump()
    merged.update(overrides)
    return AlleleLogConfig.model_validate(merged)
