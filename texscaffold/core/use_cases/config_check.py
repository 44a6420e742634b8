"""
Config check use case — validate texscaffold.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from texscaffold.core.config.loader import ConfigError, find_config_file, load_config
from texscaffold.core.models.config import ScaffoldConfig


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: ScaffoldConfig | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "defaults": self.config.defaults.overrides() if self.config else {},
            "editor_config_languages": (
                [lang.value for lang in self.config.editor_config.languages]
                if self.config else []
            ),
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate texscaffold configuration and report issues.

    A missing config file is not an error: the defaults are valid.

    Args:
        config_path: Optional explicit path to texscaffold.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()
    if config_path is None:
        result.warnings.append("No texscaffold.yml found. Built-in defaults apply.")

    result.config_path = config_path

    try:
        config = load_config(config_path)
        result.config = config
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    # Semantic checks
    defaults = config.defaults
    for name in ("filename", "title"):
        value = getattr(defaults, name)
        if value is not None and not value.strip():
            result.errors.append(f"Default {name} must not be blank.")

    policy = config.editor_config
    if not policy.directory.strip() or not policy.filename.strip():
        result.errors.append("editor_config directory and filename must not be blank.")
    if not policy.languages:
        result.warnings.append("editor_config.languages is empty. No editor settings will be written.")

    langs = [lang.value for lang in policy.languages]
    dupes = {name for name in langs if langs.count(name) > 1}
    if dupes:
        result.warnings.append(f"Duplicate editor_config languages: {', '.join(sorted(dupes))}")

    result.valid = len(result.errors) == 0
    return result
