"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from texscaffold.core.models import AnswerSet, Language


@pytest.fixture
def make_answers():
    """Build an AnswerSet from the English scenario, with overrides."""

    def _make(**overrides) -> AnswerSet:
        data = {
            "filename": "paper",
            "language": Language.ENGLISH,
            "has_images": False,
            "title": "My Paper",
            "author": "A. Author",
        }
        data.update(overrides)
        return AnswerSet(**data)

    return _make


@pytest.fixture
def english_answers(make_answers) -> AnswerSet:
    return make_answers()


@pytest.fixture
def chinese_answers(make_answers) -> AnswerSet:
    return make_answers(language=Language.CHINESE)


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """Return an empty output directory."""
    d = tmp_path / "out"
    d.mkdir()
    return d
