"""
Configuration loader — reads texscaffold.yml and answers files.

Both are YAML, validated against Pydantic schemas. texscaffold.yml is
optional: when none is found the built-in defaults are returned.
An answers file supplies a complete answer set for non-interactive runs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from texscaffold.core.models.answers import AnswerSet
from texscaffold.core.models.config import ScaffoldConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "texscaffold.yml"


class ConfigError(Exception):
    """Raised when a config or answers file is invalid or missing."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for texscaffold.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to texscaffold.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def _read_yaml_mapping(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise ConfigError(f"File not found: {path}")

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")
    return data


def load_config(path: Path | None = None) -> ScaffoldConfig:
    """Load and validate texscaffold.yml.

    Args:
        path: Explicit path to the config file. If None, searches upward;
            if nothing is found the defaults are returned.

    Returns:
        Validated ScaffoldConfig.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No %s found, using defaults", CONFIG_FILE)
            return ScaffoldConfig()

    logger.debug("Loading config from %s", path)
    data = _read_yaml_mapping(path)

    try:
        config = ScaffoldConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded config from %s", path)
    return config


def load_answers(path: Path, config: ScaffoldConfig | None = None) -> AnswerSet:
    """Load an answer set from a YAML file.

    Values missing from the file fall back to ``config.defaults`` and
    then to the built-in defaults.

    Raises:
        ConfigError: If the file is missing, unreadable, or does not
            describe a valid answer set.
    """
    data = _read_yaml_mapping(path)
    merged = dict(config.defaults.overrides()) if config else {}
    merged.update(data)

    try:
        answers = AnswerSet.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid answers in {path}: {e}") from e

    logger.info("Loaded answers for '%s' from %s", answers.filename, path)
    return answers
