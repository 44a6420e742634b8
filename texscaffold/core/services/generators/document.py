"""
LaTeX document generator — produce a .tex file from an answer set.

Selection is driven entirely by the answers: an ordered list of fragment
names is chosen, rendered, then the preamble is normalised so every
package directive sits in one contiguous block ahead of the other
preamble commands. The body skeleton is appended last.

Pure functions, no I/O. Writing is the caller's job.
"""

from __future__ import annotations

import logging

from texscaffold.core.models.answers import AnswerSet
from texscaffold.core.models.template import GeneratedFile
from texscaffold.core.services.generators.fragments import (
    body_skeleton,
    get_fragment,
    preamble_name,
)

logger = logging.getLogger(__name__)

# Commands that declare a dependency and must precede everything else.
DIRECTIVE_PREFIXES = (
    "\\usepackage",
    "\\RequirePackage",
    "\\usetikzlibrary",
    "\\tcbuselibrary",
)


def is_directive(line: str) -> bool:
    """Return True if the line declares a package or library dependency."""
    return line.lstrip().startswith(DIRECTIVE_PREFIXES)


def select_fragments(answers: AnswerSet) -> list[str]:
    """Choose fragment names for an answer set, in assembly order."""
    names = [preamble_name(answers.language), "base_packages"]

    if answers.is_math:
        names += ["math_packages", "math_environments"]

    names.append("hyperref")

    # Colored boxes are drawn by tcolorbox, which needs TikZ.
    if answers.uses_tikz or answers.uses_color_boxes:
        names.append("tikz")
    if answers.has_watermark:
        names.append("watermark")
    if answers.uses_bracket_shorthand:
        names.append("bracket_shorthand")
    if answers.no_indent:
        names.append("no_indent")
    if answers.has_images:
        names.append("images")
    if answers.uses_color_boxes:
        names.append("color_boxes")
    if answers.sectional_page_break:
        names.append("section_page_break")
    if answers.double_spacing:
        names.append("double_spacing")

    return names


def render_fragments(names: list[str]) -> list[str]:
    """Concatenate the named fragments into a list of lines."""
    lines: list[str] = []
    for name in names:
        lines.extend(get_fragment(name).strip("\n").splitlines())
    return lines


def group_directives(lines: list[str]) -> list[str]:
    """Move every directive line ahead of the non-directive lines.

    Lines before the first directive stay where they are. From the first
    directive onwards the lines are stably partitioned: directives first,
    then everything else, each side keeping its relative order.
    Applying this twice gives the same result as applying it once.
    """
    first = next((i for i, line in enumerate(lines) if is_directive(line)), None)
    if first is None:
        return list(lines)

    head = lines[:first]
    tail = lines[first:]
    directives = [line for line in tail if is_directive(line)]
    others = [line for line in tail if not is_directive(line)]
    return head + directives + others


def assemble_document(answers: AnswerSet) -> str:
    """Build the full .tex source for an answer set."""
    names = select_fragments(answers)
    logger.debug("Selected fragments: %s", ", ".join(names))

    preamble = group_directives(render_fragments(names))
    return "\n".join(preamble) + "\n\n" + body_skeleton(answers.title, answers.author)


def generate_document(answers: AnswerSet, *, overwrite: bool = False) -> GeneratedFile:
    """Generate the .tex file for an answer set.

    Args:
        answers: Validated questionnaire answers.
        overwrite: Whether an existing file may be replaced.

    Returns:
        GeneratedFile for ``<filename>.tex``.
    """
    content = assemble_document(answers)
    return GeneratedFile(
        path=answers.tex_filename,
        content=content,
        overwrite=overwrite,
        reason=f"LaTeX document '{answers.title}' ({answers.language.value})",
    )
