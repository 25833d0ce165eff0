"""Configuration settings using Pydantic Settings.

Provides typed registry configuration with environment variable support.

Usage:
    from slaughterhouse.config import SlaughterhouseSettings

    # Load from environment variables (SLAUGHTERHOUSE_*)
    settings = SlaughterhouseSettings()

    # Or override with explicit values
    settings = SlaughterhouseSettings(allocation_scope="registry")
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from slaughterhouse.storage.allocator import AllocationScope


class SlaughterhouseSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for a Slaughterhouse registry.

    Attributes:
        allocation_scope: Which hooks add_animal may use ("unit" or "registry").
        default_capacity: Hall capacity used when add_unit gets no capacity.
        warn_on_overwrite: Emit a UserWarning when a location or unit is replaced.

    Environment Variables:
        SLAUGHTERHOUSE_ALLOCATION_SCOPE
        SLAUGHTERHOUSE_DEFAULT_CAPACITY
        SLAUGHTERHOUSE_WARN_ON_OVERWRITE
    """

    model_config = SettingsConfigDict(
        env_prefix="SLAUGHTERHOUSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    allocation_scope: AllocationScope = AllocationScope.UNIT
    default_capacity: int = Field(default=5, ge=0)
    warn_on_overwrite: bool = False
