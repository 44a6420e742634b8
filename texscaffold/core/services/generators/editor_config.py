"""
Editor config generator — LaTeX Workshop build settings for VS Code.

Documents in some languages (Chinese, by default) must be built with
XeLaTeX, which LaTeX Workshop does not pick by default. For those, a
``.vscode/settings.json`` is created with a fixed set of recipes and
tools, or, if one already exists, the recipes and tools are appended to
the ones already there. Every other key in the file is left alone.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Literal

from texscaffold.core.models.answers import Language
from texscaffold.core.models.editor_config import (
    RECIPES_KEY,
    TOOLS_KEY,
    EditorSettings,
    Recipe,
    Tool,
)

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY = ".vscode"
DEFAULT_FILENAME = "settings.json"
DEFAULT_LANGUAGES: tuple[Language, ...] = (Language.CHINESE,)

_LATEX_ARGS = ["-synctex=1", "-interaction=nonstopmode", "-file-line-error", "%DOCFILE%"]

_TOOLS = [
    Tool(name="xelatex", command="xelatex", args=list(_LATEX_ARGS)),
    Tool(name="pdflatex", command="pdflatex", args=list(_LATEX_ARGS)),
    Tool(
        name="latexmk",
        command="latexmk",
        args=[
            "-synctex=1",
            "-interaction=nonstopmode",
            "-file-line-error",
            "-pdf",
            "-outdir=%OUTDIR%",
            "%DOCFILE%",
        ],
    ),
    Tool(name="bibtex", command="bibtex", args=["%DOCFILE%"]),
]

_RECIPES = [
    Recipe(name="XeLaTeX", tools=["xelatex"]),
    Recipe(name="PDFLaTeX", tools=["pdflatex"]),
    Recipe(name="Latexmk", tools=["latexmk"]),
    Recipe(name="xelatex -> bibtex -> xelatex*2", tools=["xelatex", "bibtex", "xelatex", "xelatex"]),
    Recipe(name="pdflatex -> bibtex -> pdflatex*2", tools=["pdflatex", "bibtex", "pdflatex", "pdflatex"]),
]


class EditorConfigError(Exception):
    """Raised when the editor settings file cannot be read or written.

    ``kind`` is ``"corrupt"`` when an existing file could not be parsed,
    ``"write"`` when the directory or file could not be written.
    """

    def __init__(self, kind: Literal["corrupt", "write"], path: Path, detail: str) -> None:
        self.kind = kind
        self.path = path
        self.detail = detail
        if kind == "corrupt":
            message = f"Corrupt existing editor config {path}: {detail}"
        else:
            message = f"Cannot write editor config {path}: {detail}"
        super().__init__(message)


def default_editor_settings() -> EditorSettings:
    """The fixed recipe and tool lists texscaffold contributes."""
    return EditorSettings(
        recipes=[r.model_copy(deep=True) for r in _RECIPES],
        tools=[t.model_copy(deep=True) for t in _TOOLS],
    )


def requires_editor_config(
    language: Language,
    languages: tuple[Language, ...] | list[Language] = DEFAULT_LANGUAGES,
) -> bool:
    """Whether documents in ``language`` need the editor settings file."""
    return language in languages


def merge_settings(existing: dict[str, Any], new: EditorSettings, path: Path) -> dict[str, Any]:
    """Append ``new`` recipes and tools after the existing ones.

    Keys other than the recipe and tool lists are kept as they are.

    Raises:
        EditorConfigError: If a recipe or tool value is not a list.
    """
    merged = dict(existing)
    additions = new.to_json_dict()
    for key in (RECIPES_KEY, TOOLS_KEY):
        current = existing.get(key, [])
        if not isinstance(current, list):
            raise EditorConfigError(
                "corrupt", path, f"'{key}' must be a list, got {type(current).__name__}",
            )
        merged[key] = current + additions[key]
    return merged


def _read_settings(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise EditorConfigError("corrupt", path, f"cannot read file ({e})") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise EditorConfigError(
            "corrupt", path,
            f"invalid JSON ({e}); comments and trailing commas are not supported",
        ) from e

    if not isinstance(data, dict):
        raise EditorConfigError(
            "corrupt", path, f"expected a JSON object, got {type(data).__name__}",
        )
    return data


def _write_settings(path: Path, data: dict[str, Any]) -> None:
    try:
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    except OSError as e:
        raise EditorConfigError("write", path, str(e)) from e


def write_editor_config(
    root: Path,
    directory: str = DEFAULT_DIRECTORY,
    filename: str = DEFAULT_FILENAME,
) -> Literal["created", "merged"]:
    """Create or merge the editor settings file under ``root``.

    Args:
        root: Output directory (usually the current working directory).
        directory: Editor config directory, relative to ``root``.
        filename: Settings file name inside ``directory``.

    Returns:
        ``"created"`` for a fresh file, ``"merged"`` when an existing
        file was extended.

    Raises:
        EditorConfigError: If an existing file is corrupt, or the
            directory or file cannot be written.
    """
    config_dir = root / directory
    path = config_dir / filename
    settings = default_editor_settings()

    if not config_dir.is_dir():
        try:
            config_dir.mkdir(parents=True)
        except OSError as e:
            raise EditorConfigError("write", config_dir, str(e)) from e
        logger.info("Created editor config directory %s", config_dir)

    if not path.is_file():
        _write_settings(path, settings.to_json_dict())
        logger.info("Wrote editor config %s", path)
        return "created"

    existing = _read_settings(path)
    merged = merge_settings(existing, settings, path)
    _write_settings(path, merged)
    logger.info(
        "Merged editor config %s (%d recipes, %d tools)",
        path, len(merged[RECIPES_KEY]), len(merged[TOOLS_KEY]),
    )
    return "merged"
