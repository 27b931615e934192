"""
Configuration package for statapp

Provides application settings via environment variables using pydantic-settings,
with optional per-project overrides from statapp.yaml.
"""

from .settings import appsettings, AppSettings
from .project import settings_forProject, PROJECT_CONFIG_NAME

__all__ = ["appsettings", "AppSettings", "settings_forProject", "PROJECT_CONFIG_NAME"]
