"""
Tests for the interactive questionnaire — order, defaults, validation.
"""

import click
import pytest
from click.testing import CliRunner

from texscaffold.core.models import Language, QuestionDefaults
from texscaffold.ui.cli.questionnaire import QUESTIONS, ask_answers


def _run(user_input: str, defaults: QuestionDefaults | None = None, err: bool = False):
    """Run ask_answers inside a throwaway click command."""
    captured = {}

    @click.command()
    def questionnaire():
        captured["answers"] = ask_answers(defaults, err=err)

    result = CliRunner().invoke(questionnaire, [], input=user_input)
    return result, captured.get("answers")


class TestQuestionOrder:
    def test_fixed_order(self):
        assert [q.name for q in QUESTIONS] == [
            "filename",
            "language",
            "has_images",
            "title",
            "author",
            "is_math",
            "uses_tikz",
            "uses_color_boxes",
            "uses_bracket_shorthand",
            "no_indent",
            "has_watermark",
            "sectional_page_break",
            "double_spacing",
        ]

    def test_defaults_match_model(self):
        defaults = {q.name: q.default for q in QUESTIONS}
        assert defaults["author"] == "timthedev07"
        assert defaults["is_math"] is True
        assert defaults["uses_tikz"] is False
        assert defaults["sectional_page_break"] is True
        assert defaults["double_spacing"] is True
        # no default: the user must answer
        assert defaults["has_images"] is None
        assert defaults["language"] is None


class TestAskAnswers:
    def test_all_defaults(self):
        result, answers = _run("notes\nEnglish\nn\nNotes\n" + "\n" * 9)

        assert result.exit_code == 0, result.output
        assert answers.filename == "notes"
        assert answers.language is Language.ENGLISH
        assert answers.has_images is False
        assert answers.author == "timthedev07"
        assert answers.is_math is True
        assert answers.double_spacing is True

    def test_every_question_answered(self):
        user_input = "notes.tex\nChinese\ny\nNotes\nMe\nn\ny\ny\ny\ny\ny\nn\nn\n"
        result, answers = _run(user_input)

        assert result.exit_code == 0, result.output
        assert answers.filename == "notes"
        assert answers.language is Language.CHINESE
        assert answers.has_images is True
        assert answers.author == "Me"
        assert answers.is_math is False
        assert answers.uses_tikz is True
        assert answers.uses_color_boxes is True
        assert answers.uses_bracket_shorthand is True
        assert answers.no_indent is True
        assert answers.has_watermark is True
        assert answers.sectional_page_break is False
        assert answers.double_spacing is False

    def test_has_images_requires_answer(self):
        # empty answer to has_images is asked again
        result, answers = _run("notes\nEnglish\n\ny\nNotes\n" + "\n" * 9)
        assert result.exit_code == 0, result.output
        assert answers.has_images is True

    def test_whitespace_title_rejected(self):
        result, answers = _run("notes\nEnglish\nn\n  \nNotes\n" + "\n" * 9)
        assert result.exit_code == 0, result.output
        assert "title must not be empty" in result.output
        assert answers.title == "Notes"

    def test_filename_with_separator_rejected(self):
        result, answers = _run("a/b\nnotes\nEnglish\nn\nNotes\n" + "\n" * 9)
        assert result.exit_code == 0, result.output
        assert "path separator" in result.output
        assert answers.filename == "notes"

    @pytest.mark.parametrize("bad", [".tex", "  .TEX ", "   "])
    def test_filename_empty_after_normalizing_reprompts(self, bad):
        result, answers = _run(f"{bad}\nnotes\nEnglish\nn\nNotes\n" + "\n" * 9)
        assert result.exit_code == 0, result.output
        assert "Error: filename must not be empty." in result.output
        assert answers.filename == "notes"

    def test_prompts_to_stderr(self):
        result, answers = _run("notes\nEnglish\nn\nNotes\n" + "\n" * 9, err=True)
        assert result.exit_code == 0, result.output
        assert answers.filename == "notes"
        assert "Title of the document" not in result.stdout
        assert "Title of the document" in result.stderr

    def test_config_defaults(self):
        defaults = QuestionDefaults(language=Language.CHINESE, author="Jane", is_math=False)
        result, answers = _run("notes\n\nn\nNotes\n" + "\n" * 9, defaults)

        assert result.exit_code == 0, result.output
        assert answers.language is Language.CHINESE
        assert answers.author == "Jane"
        assert answers.is_math is False

    @pytest.mark.parametrize("cut", [0, 2, 4])
    def test_eof_aborts(self, cut):
        lines = ["notes", "English", "n", "Notes"]
        result, answers = _run("\n".join(lines[:cut]) + ("\n" if cut else ""))
        assert result.exit_code != 0
        assert answers is None
