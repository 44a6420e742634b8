"""
Tests for configuration loading — texscaffold.yml and answers files.
"""

import textwrap
from pathlib import Path

import pytest

from texscaffold.core.config.loader import (
    ConfigError,
    find_config_file,
    load_answers,
    load_config,
)
from texscaffold.core.models import Language, ScaffoldConfig
from texscaffold.core.use_cases.config_check import check_config


@pytest.fixture
def valid_config_yml(tmp_path: Path) -> Path:
    """Create a valid texscaffold.yml in a temp directory."""
    content = textwrap.dedent("""\
        defaults:
          author: Jane Doe
          language: English
          double_spacing: false
        editor_config:
          languages: [Chinese, English]
          directory: .vscode
          filename: settings.json
    """)
    path = tmp_path / "texscaffold.yml"
    path.write_text(content)
    return path


@pytest.fixture
def answers_yml(tmp_path: Path) -> Path:
    content = textwrap.dedent("""\
        filename: thesis
        language: Chinese
        has_images: true
        title: "A Thesis"
        uses_tikz: true
    """)
    path = tmp_path / "answers.yml"
    path.write_text(content)
    return path


class TestFindConfigFile:
    def test_finds_in_dir(self, valid_config_yml: Path):
        assert find_config_file(valid_config_yml.parent) == valid_config_yml.resolve()

    def test_finds_in_parent(self, valid_config_yml: Path):
        child = valid_config_yml.parent / "a" / "b"
        child.mkdir(parents=True)
        assert find_config_file(child) == valid_config_yml.resolve()

    def test_not_found(self, tmp_path: Path):
        empty = tmp_path / "empty"
        empty.mkdir()
        # tmp dirs normally have no texscaffold.yml above them
        result = find_config_file(empty)
        assert result is None or result.name == "texscaffold.yml"


class TestLoadConfig:
    def test_valid(self, valid_config_yml: Path):
        config = load_config(valid_config_yml)
        assert config.defaults.author == "Jane Doe"
        assert config.defaults.language is Language.ENGLISH
        assert config.defaults.double_spacing is False
        assert config.editor_config.languages == [Language.CHINESE, Language.ENGLISH]

    def test_no_file_gives_defaults(self, tmp_path: Path, monkeypatch):
        monkeypatch.setattr(
            "texscaffold.core.config.loader.find_config_file", lambda start_dir=None: None,
        )
        assert load_config() == ScaffoldConfig()

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "texscaffold.yml"
        path.write_text("")
        assert load_config(path) == ScaffoldConfig()

    def test_explicit_missing(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "texscaffold.yml"
        path.write_text("defaults: [unclosed")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "texscaffold.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_schema_violation(self, tmp_path: Path):
        path = tmp_path / "texscaffold.yml"
        path.write_text("editor_config:\n  languages: [Klingon]\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)


class TestLoadAnswers:
    def test_valid(self, answers_yml: Path):
        answers = load_answers(answers_yml)
        assert answers.filename == "thesis"
        assert answers.language is Language.CHINESE
        assert answers.has_images is True
        assert answers.uses_tikz is True
        assert answers.is_math is True

    def test_config_defaults_fill_gaps(self, answers_yml: Path, valid_config_yml: Path):
        answers = load_answers(answers_yml, load_config(valid_config_yml))
        assert answers.author == "Jane Doe"
        assert answers.double_spacing is False
        # file wins over config defaults
        assert answers.language is Language.CHINESE

    def test_blank_title(self, tmp_path: Path):
        path = tmp_path / "answers.yml"
        path.write_text("filename: x\nlanguage: English\nhas_images: false\ntitle: '  '\n")
        with pytest.raises(ConfigError, match="Invalid answers"):
            load_answers(path)

    def test_incomplete(self, tmp_path: Path):
        path = tmp_path / "answers.yml"
        path.write_text("filename: x\n")
        with pytest.raises(ConfigError):
            load_answers(path)


class TestCheckConfig:
    def test_valid(self, valid_config_yml: Path):
        result = check_config(valid_config_yml)
        assert result.valid
        assert result.errors == []
        d = result.to_dict()
        assert d["valid"] is True
        assert d["editor_config_languages"] == ["Chinese", "English"]

    def test_invalid(self, tmp_path: Path):
        path = tmp_path / "texscaffold.yml"
        path.write_text("defaults:\n  autor: typo\n")
        result = check_config(path)
        assert not result.valid
        assert result.errors

    def test_blank_default_title(self, tmp_path: Path):
        path = tmp_path / "texscaffold.yml"
        path.write_text("defaults:\n  title: '   '\n")
        result = check_config(path)
        assert not result.valid
        assert any("title" in e for e in result.errors)

    def test_empty_languages_warns(self, tmp_path: Path):
        path = tmp_path / "texscaffold.yml"
        path.write_text("editor_config:\n  languages: []\n")
        result = check_config(path)
        assert result.valid
        assert any("empty" in w for w in result.warnings)

    def test_no_file_is_valid(self, monkeypatch):
        monkeypatch.setattr(
            "texscaffold.core.use_cases.config_check.find_config_file", lambda: None,
        )
        monkeypatch.setattr(
            "texscaffold.core.config.loader.find_config_file", lambda start_dir=None: None,
        )
        result = check_config()
        assert result.valid
        assert result.warnings
