"""Holder policy configuration and YAML loading."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

DEFAULT_CONFIG_FILE = "appcontext.yaml"


class ReinitializePolicy(str, Enum):
    """What initialize() does when a handle is already stored.

    WARN logs at WARNING level, which setup_logger() only passes at
    verbosity 1 or higher; verbosity 0 shows errors only.
    """

    ALLOW = "allow"  # Overwrite silently
    WARN = "warn"  # Overwrite and log a warning
    FORBID = "forbid"  # Raise AlreadyInitializedError, keep the stored handle


class UninitializedReadPolicy(str, Enum):
    """What current() does when no handle is stored."""

    NONE = "none"  # Return None
    RAISE = "raise"  # Raise NotInitializedError


class HolderConfig(BaseModel):
    """Policy for a ContextHolder.

    The defaults reproduce a bare global: re-initialization overwrites and
    reading before initialization yields None.
    """

    reinitialize: ReinitializePolicy = ReinitializePolicy.ALLOW
    uninitialized_read: UninitializedReadPolicy = UninitializedReadPolicy.NONE

    model_config = {"frozen": True, "extra": "forbid"}


def load_holder_config(config_path: Path | str) -> HolderConfig:
    """Load holder configuration from YAML file.

    The policy lives under a top-level ``context`` section. Files without
    that section yield the defaults, so the section can share a file with
    other settings of the host application.

    Args:
        config_path: Path to the YAML file

    Returns:
        HolderConfig built from the ``context`` section

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is empty or invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML in {config_path}: {e}") from e

    if not data:
        raise ValueError("Empty configuration file")

    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping, got {type(data).__name__}")

    section: Any = data.get("context")
    if section is None:
        return HolderConfig()

    if not isinstance(section, dict):
        raise ValueError("'context' section must be a mapping")

    try:
        return HolderConfig.model_validate(section)
    except ValidationError as e:
        raise ValueError(f"Invalid 'context' section in {config_path}:\n{e}") from e
