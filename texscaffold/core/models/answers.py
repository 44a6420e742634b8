"""
Answer set model — the validated questionnaire responses.

Built once per run, either from the interactive questionnaire or from an
answers file, and handed to the document assembler. Immutable.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_AUTHOR = "timthedev07"


def normalize_filename(value: str) -> str:
    """Trim a filename and drop a trailing .tex.

    Raises:
        ValueError: If nothing is left, or the name contains a path separator.
    """
    value = value.strip()
    if value.lower().endswith(".tex"):
        value = value[: -len(".tex")].rstrip()
    if not value:
        raise ValueError("filename must not be empty")
    if "/" in value or "\\" in value:
        raise ValueError("filename must not contain a path separator")
    return value


def normalize_title(value: str) -> str:
    """Trim a title. Raises ValueError if it is blank."""
    value = value.strip()
    if not value:
        raise ValueError("title must not be empty")
    return value


class Language(StrEnum):
    """Language the document is written in."""

    CHINESE = "Chinese"
    ENGLISH = "English"


class AnswerSet(BaseModel):
    """Everything the assembler needs to know about the document.

    ``filename`` and ``title`` are trimmed and must be non-empty.
    A trailing ``.tex`` on the filename is dropped; the extension is
    added by the generator.
    """

    model_config = ConfigDict(frozen=True)

    filename: str
    language: Language
    has_images: bool
    title: str
    author: str = DEFAULT_AUTHOR
    is_math: bool = True
    uses_tikz: bool = False
    uses_color_boxes: bool = False
    uses_bracket_shorthand: bool = False
    no_indent: bool = False
    has_watermark: bool = False
    sectional_page_break: bool = True
    double_spacing: bool = True

    @field_validator("filename")
    @classmethod
    def _check_filename(cls, value: str) -> str:
        return normalize_filename(value)

    @field_validator("title")
    @classmethod
    def _check_title(cls, value: str) -> str:
        return normalize_title(value)

    @field_validator("author")
    @classmethod
    def _strip_author(cls, value: str) -> str:
        return value.strip()

    @property
    def tex_filename(self) -> str:
        """Name of the generated LaTeX file."""
        return f"{self.filename}.tex"
