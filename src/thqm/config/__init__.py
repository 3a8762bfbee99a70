"""Configuration management for thqm.

Loads and validates YAML-based configuration with Pydantic models.
Supports environment variable overrides such as ``THQM_PASSWORD``.
"""

from thqm.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
