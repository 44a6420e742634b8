"""
Tool configuration model — loaded from texscaffold.yml.

Everything is optional. Without a config file the built-in defaults
apply: questionnaire defaults as documented on ``AnswerSet`` and editor
settings written for Chinese documents only.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from texscaffold.core.models.answers import Language


class QuestionDefaults(BaseModel):
    """Overrides for questionnaire defaults. ``None`` keeps the built-in one."""

    model_config = ConfigDict(extra="forbid")

    filename: str | None = None
    language: Language | None = None
    has_images: bool | None = None
    title: str | None = None
    author: str | None = None
    is_math: bool | None = None
    uses_tikz: bool | None = None
    uses_color_boxes: bool | None = None
    uses_bracket_shorthand: bool | None = None
    no_indent: bool | None = None
    has_watermark: bool | None = None
    sectional_page_break: bool | None = None
    double_spacing: bool | None = None

    def overrides(self) -> dict[str, Any]:
        """Only the fields that were actually set."""
        return self.model_dump(exclude_none=True)


class EditorConfigPolicy(BaseModel):
    """When and where the LaTeX Workshop settings file is written."""

    model_config = ConfigDict(extra="forbid")

    languages: list[Language] = Field(default_factory=lambda: [Language.CHINESE])
    directory: str = ".vscode"
    filename: str = "settings.json"


class ScaffoldConfig(BaseModel):
    """Root of texscaffold.yml."""

    model_config = ConfigDict(extra="forbid")

    defaults: QuestionDefaults = Field(default_factory=QuestionDefaults)
    editor_config: EditorConfigPolicy = Field(default_factory=EditorConfigPolicy)
