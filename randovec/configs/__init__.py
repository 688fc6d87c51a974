"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from randovec.configs.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
