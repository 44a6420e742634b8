"""
Interactive questionnaire — asks the document questions with click prompts.

Questions are asked in a fixed order, each one only after the previous
one is answered. Blank required text is rejected and asked again.
Defaults come from ``AnswerSet`` unless texscaffold.yml overrides them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import click

from texscaffold.core.models.answers import (
    DEFAULT_AUTHOR,
    AnswerSet,
    Language,
    normalize_filename,
    normalize_title,
)
from texscaffold.core.models.config import QuestionDefaults


@dataclass(frozen=True)
class Question:
    """One questionnaire entry."""

    name: str
    message: str
    kind: str                 # text | choice | confirm
    default: Any = None
    required: bool = False
    choices: tuple[str, ...] = ()


QUESTIONS: tuple[Question, ...] = (
    Question("filename", "File name (without .tex)", "text", required=True),
    Question(
        "language", "Language of the document", "choice",
        choices=tuple(lang.value for lang in Language),
    ),
    Question("has_images", "Does the document contain images?", "confirm"),
    Question("title", "Title of the document", "text", required=True),
    Question("author", "Author", "text", default=DEFAULT_AUTHOR),
    Question("is_math", "Is it a math document?", "confirm", default=True),
    Question("uses_tikz", "Will you draw TikZ diagrams?", "confirm", default=False),
    Question("uses_color_boxes", "Use colored boxes?", "confirm", default=False),
    Question(
        "uses_bracket_shorthand", "Add bracket shorthand macros (\\pa, \\br, \\cb)?", "confirm",
        default=False,
    ),
    Question("no_indent", "Disable paragraph indentation?", "confirm", default=False),
    Question("has_watermark", "Add a DRAFT watermark?", "confirm", default=False),
    Question("sectional_page_break", "Start each section on a new page?", "confirm", default=True),
    Question("double_spacing", "Use double line spacing?", "confirm", default=True),
)


# Same rules the AnswerSet model applies, checked while the prompt is still open.
_NORMALIZERS = {
    "filename": normalize_filename,
    "title": normalize_title,
}


def _validated(name: str):
    normalize = _NORMALIZERS[name]

    def convert(value: str) -> str:
        try:
            return normalize(value)
        except ValueError as e:
            raise click.BadParameter(f"{e}.") from e

    return convert


def _ask(question: Question, default: Any, err: bool) -> Any:
    if question.kind == "confirm":
        return click.confirm(question.message, default=default, err=err)

    if question.kind == "choice":
        return click.prompt(
            question.message,
            type=click.Choice(question.choices),
            default=default,
            err=err,
        )

    if question.required:
        return click.prompt(
            question.message,
            default=default,
            value_proc=_validated(question.name),
            err=err,
        )
    return click.prompt(question.message, default=default, err=err)


def ask_answers(defaults: QuestionDefaults | None = None, *, err: bool = False) -> AnswerSet:
    """Run the questionnaire and return the validated answers.

    Args:
        defaults: Optional overrides for the built-in defaults.
        err: Write prompts to stderr, keeping stdout for command output.

    Raises:
        click.Abort: If the user aborts a prompt (Ctrl-C / EOF).
    """
    overrides = defaults.overrides() if defaults else {}
    answers: dict[str, Any] = {}

    for question in QUESTIONS:
        default = overrides.get(question.name, question.default)
        if isinstance(default, Language):
            default = default.value
        answers[question.name] = _ask(question, default, err)

    return AnswerSet.model_validate(answers)
