"""Core: config, error mapping, rate limiting and application bootstrap.

Single place for settings and shared wiring.
"""

from app.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
