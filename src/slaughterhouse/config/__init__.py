"""Configuration module using Pydantic Settings.

Usage:
    from slaughterhouse.config import SlaughterhouseSettings

    settings = SlaughterhouseSettings(default_capacity=10)
"""

from slaughterhouse.config.settings import SlaughterhouseSettings

__all__ = [
    "SlaughterhouseSettings",
]
