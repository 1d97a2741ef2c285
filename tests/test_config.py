"""Tests for holder configuration loading."""

from pathlib import Path
from tempfile import NamedTemporaryFile

import pytest
from pydantic import ValidationError

from appcontext.config import (
    HolderConfig,
    ReinitializePolicy,
    UninitializedReadPolicy,
    load_holder_config,
)


def _write_config(content: str) -> Path:
    with NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write(content)
        return Path(f.name)


def test_load_full_context_section():
    """Test loading a config with both policies set."""
    config_path = _write_config(
        """
context:
  reinitialize: forbid
  uninitialized_read: raise
"""
    )

    try:
        config = load_holder_config(config_path)

        assert config.reinitialize == ReinitializePolicy.FORBID
        assert config.uninitialized_read == UninitializedReadPolicy.RAISE
    finally:
        config_path.unlink()


def test_load_partial_context_section_uses_defaults():
    """Test that omitted keys fall back to defaults."""
    config_path = _write_config(
        """
context:
  reinitialize: warn
"""
    )

    try:
        config = load_holder_config(config_path)

        assert config.reinitialize == ReinitializePolicy.WARN
        assert config.uninitialized_read == UninitializedReadPolicy.NONE
    finally:
        config_path.unlink()


def test_load_without_context_section_uses_defaults():
    """Test that a file holding only other settings yields the defaults."""
    config_path = _write_config(
        """
logging:
  level: debug
"""
    )

    try:
        assert load_holder_config(config_path) == HolderConfig()
    finally:
        config_path.unlink()


def test_load_accepts_string_path(tmp_path: Path):
    """Test that str paths are accepted."""
    config_file = tmp_path / "appcontext.yaml"
    config_file.write_text("context:\n  uninitialized_read: raise\n")

    config = load_holder_config(str(config_file))

    assert config.uninitialized_read == UninitializedReadPolicy.RAISE


def test_load_missing_file():
    """Test that a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_holder_config(Path("/nonexistent/appcontext.yaml"))


def test_load_empty_file():
    """Test that an empty file is rejected."""
    config_path = _write_config("")

    try:
        with pytest.raises(ValueError, match="Empty configuration file"):
            load_holder_config(config_path)
    finally:
        config_path.unlink()


def test_load_non_mapping_document():
    """Test that a top-level list is rejected."""
    config_path = _write_config("- context\n- other\n")

    try:
        with pytest.raises(ValueError, match="must be a mapping"):
            load_holder_config(config_path)
    finally:
        config_path.unlink()


def test_load_invalid_policy_value():
    """Test that an unknown policy value names the file."""
    config_path = _write_config(
        """
context:
  reinitialize: sometimes
"""
    )

    try:
        with pytest.raises(ValueError, match="Invalid 'context' section"):
            load_holder_config(config_path)
    finally:
        config_path.unlink()


def test_load_unknown_key_rejected():
    """Test that typos in the context section are not silently ignored."""
    config_path = _write_config(
        """
context:
  reinitialise: forbid
"""
    )

    try:
        with pytest.raises(ValueError, match="Invalid 'context' section"):
            load_holder_config(config_path)
    finally:
        config_path.unlink()


def test_load_context_section_not_mapping():
    """Test that a scalar context section is rejected."""
    config_path = _write_config("context: forbid\n")

    try:
        with pytest.raises(ValueError, match="'context' section must be a mapping"):
            load_holder_config(config_path)
    finally:
        config_path.unlink()


def test_holder_config_is_frozen():
    """Test that a config cannot be mutated after creation."""
    config = HolderConfig()

    with pytest.raises(ValidationError):
        config.reinitialize = ReinitializePolicy.FORBID  # type: ignore[misc]


def test_holder_config_accepts_enum_values_as_strings():
    """Test that policies can be given by their string values."""
    config = HolderConfig.model_validate({"reinitialize": "forbid", "uninitialized_read": "raise"})

    assert config.reinitialize is ReinitializePolicy.FORBID
    assert config.uninitialized_read is UninitializedReadPolicy.RAISE


def test_load_malformed_yaml():
    """Test that a YAML syntax error is reported as ValueError naming the file."""
    config_path = _write_config("context:\n  reinitialize: [forbid\n")

    try:
        with pytest.raises(ValueError, match="Failed to parse YAML in"):
            load_holder_config(config_path)
    finally:
        config_path.unlink()


def test_load_utf8_content(tmp_path: Path):
    """Test that non-ASCII text in the file is read as UTF-8."""
    config_file = tmp_path / "appcontext.yaml"
    config_file.write_text(
        "# Politique du contexte par défaut\ncontext:\n  reinitialize: forbid\n",
        encoding="utf-8",
    )

    config = load_holder_config(config_file)

    assert config.reinitialize == ReinitializePolicy.FORBID
