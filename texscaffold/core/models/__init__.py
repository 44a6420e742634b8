"""
Domain models — Pydantic types for texscaffold.

All models are re-exported here for convenient access:

    from texscaffold.core.models import AnswerSet, Language, GeneratedFile
"""

from texscaffold.core.models.answers import DEFAULT_AUTHOR, AnswerSet, Language
from texscaffold.core.models.config import EditorConfigPolicy, QuestionDefaults, ScaffoldConfig
from texscaffold.core.models.editor_config import (
    RECIPES_KEY,
    TOOLS_KEY,
    EditorSettings,
    Recipe,
    Tool,
)
from texscaffold.core.models.template import GeneratedFile

__all__ = [
    # answers.py
    "AnswerSet",
    "DEFAULT_AUTHOR",
    # config.py
    "EditorConfigPolicy",
    # editor_config.py
    "EditorSettings",
    # template.py
    "GeneratedFile",
    "Language",
    "QuestionDefaults",
    "RECIPES_KEY",
    "Recipe",
    "ScaffoldConfig",
    "TOOLS_KEY",
    "Tool",
]
