"""
Editor config models — LaTeX Workshop recipes and tools.

These mirror the two array-valued keys of a VS Code ``settings.json``
that LaTeX Workshop reads to build a document.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

RECIPES_KEY = "latex-workshop.latex.recipes"
TOOLS_KEY = "latex-workshop.latex.tools"


class Recipe(BaseModel):
    """A named build sequence: tool names run in order."""

    name: str
    tools: list[str] = Field(default_factory=list)


class Tool(BaseModel):
    """A single build tool invocation."""

    name: str
    command: str
    args: list[str] = Field(default_factory=list)


class EditorSettings(BaseModel):
    """The recipe and tool lists texscaffold contributes to settings.json."""

    recipes: list[Recipe] = Field(default_factory=list)
    tools: list[Tool] = Field(default_factory=list)

    def to_json_dict(self) -> dict[str, Any]:
        """Render with the key names LaTeX Workshop expects."""
        return {
            RECIPES_KEY: [r.model_dump() for r in self.recipes],
            TOOLS_KEY: [t.model_dump() for t in self.tools],
        }
