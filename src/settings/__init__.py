"""Environment-driven service settings."""

from .app import DEVELOPMENT_ENVIRONMENT, AppSettings, get_settings


__all__ = ["DEVELOPMENT_ENVIRONMENT", "AppSettings", "get_settings"]
