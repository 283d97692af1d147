# SPDX-License-Identifier: MIT
"""
Scanner configuration loader for leakscan.
"""
from __future__ import annotations

import copy
import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from leakscan.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = (".leakscan.yml", ".leakscan.yaml")

DEFAULT_EXCLUDE_DIRS = [
    ".git",
    ".svn",
    ".hg",
    ".venv",
    "venv",
    "env",
    "node_modules",
    "bower_components",
    "vendor",
    "third_party",
    "dist",
    "build",
    "target",
    ".next",
    ".nuxt",
    "coverage",
    ".pytest_cache",
    ".mypy_cache",
    ".tox",
    "__pycache__",
]

DEFAULT_MAX_FILE_SIZE = 1_000_000

_DEFAULTS: Dict[str, Any] = {
    "exclude_dirs": DEFAULT_EXCLUDE_DIRS,
    "exclude_globs": [],
    "max_file_size": DEFAULT_MAX_FILE_SIZE,
    "disabled_rules": [],
    "allowlist": [],
    "rules": [],
    "jobs": 1,
}

_LIST_KEYS = ("exclude_dirs", "exclude_globs", "disabled_rules", "allowlist", "rules")


def load_scanner_config(config_path: Optional[str] = None, repo_root: str = ".") -> Dict[str, Any]:
    """
    Load scanner configuration following the search order.

    Args:
        config_path: Explicit config path from --config CLI flag
        repo_root: Scan root searched for .leakscan.yml/.leakscan.yaml

    Returns:
        Dictionary containing scanner configuration, with "source" set to the
        file it came from (None for built-in defaults)

    Raises:
        ConfigError: If config file is malformed or explicitly provided config is missing
    """
    # 1. If CLI --config provided → load it
    if config_path:
        config_abs_path = Path(config_path).resolve()
        if not config_abs_path.is_file():
            raise ConfigError(
                f"Specified config file not found: {config_abs_path}",
                config_path=str(config_abs_path),
            )
        return _load_from(config_abs_path)

    # 2. Look for .leakscan.yml or .leakscan.yaml at the scan root
    root = Path(repo_root).resolve()
    if root.is_dir():
        for config_name in CONFIG_FILENAMES:
            config_file = root / config_name
            if config_file.is_file():
                return _load_from(config_file)

    # 3. Use built-in defaults
    logger.info("Using default scanner config")
    return get_default_scanner_config()


def _load_from(config_file: Path) -> Dict[str, Any]:
    config = _load_yaml_config(config_file)
    config["source"] = str(config_file)
    logger.info("Loaded config: %s", config_file)
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """Load and validate YAML config file."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config file: {e}", config_path=str(config_path)) from e
    except OSError as e:
        raise ConfigError(f"Failed to read config file: {e}", config_path=str(config_path)) from e

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise ConfigError("Config must be a mapping", config_path=str(config_path))

    return _apply_scanner_defaults(config, str(config_path))


def _apply_scanner_defaults(config: Dict[str, Any], source: Optional[str] = None) -> Dict[str, Any]:
    """Apply default values to scanner configuration and check types."""
    for key, default in _DEFAULTS.items():
        if config.get(key) is None:
            config[key] = copy.deepcopy(default)

    for key in _LIST_KEYS:
        if not isinstance(config[key], list):
            raise ConfigError(f"'{key}' must be a list", config_path=source, section=key)

    for key in ("max_file_size", "jobs"):
        value = config[key]
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ConfigError(f"'{key}' must be a positive integer", config_path=source, section=key)

    for entry in config["rules"]:
        if not isinstance(entry, dict):
            raise ConfigError("Each custom rule must be a mapping", config_path=source, section="rules")

    compiled = []
    for pattern in config["allowlist"]:
        try:
            compiled.append(re.compile(str(pattern)))
        except re.error as e:
            raise ConfigError(
                f"Invalid allowlist pattern {pattern!r}: {e}", config_path=source, section="allowlist"
            ) from e
    config["allowlist"] = compiled

    return config


def get_default_scanner_config() -> Dict[str, Any]:
    """
    Get the default scanner configuration.

    Returns:
        Dictionary with default scanner settings
    """
    config = copy.deepcopy(_DEFAULTS)
    config["source"] = None
    return config


def create_default_config_template() -> str:
    """
    Create a minimal .leakscan.yml template with commented examples.

    Returns:
        YAML string with default configuration template
    """
    dirs = "\n".join(f"  - {d}" for d in DEFAULT_EXCLUDE_DIRS)
    return f"""# leakscan configuration
# Place this file at the root of the scanned directory.

# Directory names skipped wherever they appear
exclude_dirs:
{dirs}

# fnmatch patterns matched against root-relative paths
exclude_globs: []
  # - "docs/examples/*"

# Files larger than this many bytes are skipped
max_file_size: {DEFAULT_MAX_FILE_SIZE}

# Built-in rules to turn off, by name (see `leakscan rules`)
disabled_rules: []

# Regexes; a match whose secret value matches any of them is dropped
allowlist: []
  # - "^sk_test_"

# Extra rules
rules: []
  # - name: internal_service_token
  #   pattern: "itk_[A-Za-z0-9]{{32}}"
  #   severity: HIGH
  #   description: Internal service token

# Worker threads used to scan files
jobs: 1
"""
