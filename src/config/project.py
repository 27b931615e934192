"""
Per-project settings overrides

A project root may contain a statapp.yaml file whose top-level keys are
AppSettings field names. Values found there take precedence over the
environment for that project only.

Example statapp.yaml:
    pages_dir: pages
    script_uri_prefix: /
    minify_output: false
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .settings import AppSettings, appsettings
from ..lib.errors import ProjectConfigError

PROJECT_CONFIG_NAME = "statapp.yaml"


def projectConfig_load(project_dir: Path) -> Dict[str, Any]:
    """Load and parse statapp.yaml, returning {} when the project has none"""
    config_path = project_dir / PROJECT_CONFIG_NAME
    if not config_path.exists():
        return {}
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ProjectConfigError(f"Failed to parse {PROJECT_CONFIG_NAME}: {e}")
    except OSError as e:
        raise ProjectConfigError(f"Failed to load {PROJECT_CONFIG_NAME}: {e}")

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ProjectConfigError(f"{PROJECT_CONFIG_NAME} must contain a mapping of settings")
    return config


def settings_forProject(project_dir: Path, base: Optional[AppSettings] = None) -> AppSettings:
    """
    Build the settings for one project.

    Args:
        project_dir: Project root directory
        base: Settings to start from (default: the environment singleton)

    Returns:
        AppSettings with statapp.yaml overrides applied

    Raises:
        ProjectConfigError: If statapp.yaml is malformed or names unknown settings
    """
    base = base or appsettings
    overrides = projectConfig_load(project_dir)
    if not overrides:
        return base

    unknown = sorted(set(overrides) - set(AppSettings.model_fields))
    if unknown:
        raise ProjectConfigError(
            f"Unknown setting(s) in {PROJECT_CONFIG_NAME}: {', '.join(unknown)}"
        )

    try:
        return AppSettings.model_validate({**base.model_dump(), **overrides})
    except ValidationError as e:
        raise ProjectConfigError(f"Invalid value in {PROJECT_CONFIG_NAME}: {e}")
