"""
Scaffold use case — write the document, then the editor config.

The two artifacts are independent. A failure writing the document is
recorded and the editor config step still runs; a failure in the editor
config step is recorded as well. The caller decides how to report.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from texscaffold.core.models.answers import AnswerSet
from texscaffold.core.models.config import ScaffoldConfig
from texscaffold.core.models.template import GeneratedFile
from texscaffold.core.services.generators.document import generate_document
from texscaffold.core.services.generators.editor_config import (
    EditorConfigError,
    requires_editor_config,
    write_editor_config,
)

logger = logging.getLogger(__name__)


@dataclass
class ScaffoldResult:
    """Outcome of one scaffold run."""

    document_path: Path | None = None
    document_written: bool = False
    document_skipped: bool = False
    document_error: str | None = None
    editor_config_path: Path | None = None
    editor_config_action: str | None = None     # created | merged | None
    editor_config_error: str | None = None
    editor_config_error_kind: str | None = None  # corrupt | write

    @property
    def ok(self) -> bool:
        return self.document_error is None and self.editor_config_error is None

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "document": {
                "path": str(self.document_path) if self.document_path else None,
                "written": self.document_written,
                "skipped": self.document_skipped,
                "error": self.document_error,
            },
            "editor_config": {
                "path": str(self.editor_config_path) if self.editor_config_path else None,
                "action": self.editor_config_action,
                "error": self.editor_config_error,
                "error_kind": self.editor_config_error_kind,
            },
        }


def write_generated(root: Path, generated: GeneratedFile) -> bool:
    """Write a generated file under ``root``.

    Returns:
        False if the file exists and ``generated.overwrite`` is not set,
        True once written.

    Raises:
        OSError: If the file cannot be written.
    """
    target = root / generated.path
    if target.exists() and not generated.overwrite:
        logger.info("Not overwriting existing %s", target)
        return False

    target.write_text(generated.content, encoding="utf-8")
    logger.info("Wrote %s (%d bytes): %s", target, len(generated.content), generated.reason)
    return True


def run_scaffold(
    answers: AnswerSet,
    root: Path | None = None,
    *,
    overwrite: bool = False,
    config: ScaffoldConfig | None = None,
) -> ScaffoldResult:
    """Generate and write the document and, if needed, the editor config.

    Args:
        answers: Validated answer set.
        root: Output directory (default: cwd).
        overwrite: Replace an existing .tex file.
        config: Tool configuration (default: built-in defaults).

    Returns:
        ScaffoldResult describing what was written and what failed.
    """
    root = root or Path.cwd()
    config = config or ScaffoldConfig()
    result = ScaffoldResult()

    # ── Document ────────────────────────────────────────────────
    generated = generate_document(answers, overwrite=overwrite)
    result.document_path = root / generated.path
    try:
        result.document_written = write_generated(root, generated)
        result.document_skipped = not result.document_written
    except OSError as e:
        logger.error("Failed to write %s: %s", result.document_path, e)
        result.document_error = str(e)

    # ── Editor config ───────────────────────────────────────────
    policy = config.editor_config
    if not requires_editor_config(answers.language, policy.languages):
        logger.debug("No editor config needed for %s", answers.language.value)
        return result

    result.editor_config_path = root / policy.directory / policy.filename
    try:
        result.editor_config_action = write_editor_config(
            root, directory=policy.directory, filename=policy.filename,
        )
    except EditorConfigError as e:
        logger.error("%s", e)
        result.editor_config_error = str(e)
        result.editor_config_error_kind = e.kind

    return result
