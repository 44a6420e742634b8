"""
Fragment library — static LaTeX blocks the document generator picks from.

Each fragment covers one optional feature of the generated document.
Fragments freely mix package directives and other preamble commands;
the assembler regroups directives afterwards, so a fragment only has to
keep its own lines in a valid relative order.
"""

from __future__ import annotations

from texscaffold.core.models.answers import Language

# ── Preambles (one per language) ────────────────────────────────

_PREAMBLE_CHINESE = r"""
\documentclass[UTF8, a4paper, 12pt]{ctexart}
\usepackage{geometry}
\geometry{margin=1in}
"""

_PREAMBLE_ENGLISH = r"""
\documentclass[a4paper, 12pt]{article}
\usepackage[utf8]{inputenc}
\usepackage[T1]{fontenc}
\usepackage{lmodern}
\usepackage{geometry}
\geometry{margin=1in}
"""

PREAMBLES: dict[str, str] = {
    "preamble_chinese": _PREAMBLE_CHINESE,
    "preamble_english": _PREAMBLE_ENGLISH,
}


def preamble_name(language: Language) -> str:
    """Name of the preamble fragment for a document language."""
    return f"preamble_{language.value.lower()}"


# ── Feature fragments ───────────────────────────────────────────

_BASE_PACKAGES = r"""
\usepackage{xcolor}
\usepackage{enumitem}
\usepackage{booktabs}
\usepackage{fancyhdr}
\pagestyle{fancy}
\fancyhf{}
\rhead{\leftmark}
\cfoot{\thepage}
"""

_MATH_PACKAGES = r"""
\usepackage{amsmath}
\usepackage{amssymb}
\usepackage{amsthm}
\usepackage{mathtools}
\usepackage{bm}
"""

_MATH_ENVIRONMENTS = r"""
\theoremstyle{definition}
\newtheorem{definition}{Definition}[section]
\newtheorem{example}{Example}[section]
\theoremstyle{plain}
\newtheorem{theorem}{Theorem}[section]
\newtheorem{lemma}[theorem]{Lemma}
\newtheorem{proposition}[theorem]{Proposition}
\newtheorem{corollary}[theorem]{Corollary}
\theoremstyle{remark}
\newtheorem*{remark}{Remark}
"""

_HYPERREF = r"""
\usepackage{hyperref}
\usepackage[nameinlink]{cleveref}
\hypersetup{
    colorlinks=true,
    linkcolor=blue,
    urlcolor=cyan,
    citecolor=teal,
}
"""

# TikZ also backs tcolorbox, so color boxes pull this in too.
_TIKZ = r"""
\usepackage{tikz}
\usepackage{pgfplots}
\usetikzlibrary{arrows.meta, positioning, calc, shapes.geometric}
\pgfplotsset{compat=1.18}
"""

_WATERMARK = r"""
\usepackage{draftwatermark}
\SetWatermarkText{DRAFT}
\SetWatermarkScale{1}
\SetWatermarkColor[gray]{0.9}
"""

_BRACKET_SHORTHAND = r"""
\newcommand{\pa}[1]{\left( #1 \right)}
\newcommand{\br}[1]{\left[ #1 \right]}
\newcommand{\cb}[1]{\left\{ #1 \right\}}
\newcommand{\abs}[1]{\left| #1 \right|}
\newcommand{\norm}[1]{\left\| #1 \right\|}
"""

_NO_INDENT = r"""
\setlength{\parindent}{0pt}
"""

_IMAGES = r"""
\usepackage{graphicx}
\usepackage{float}
\graphicspath{{./images/}}
\newcommand{\img}[3][0.8]{
    \begin{figure}[H]
        \centering
        \includegraphics[width=#1\textwidth]{#2}
        \caption{#3}
    \end{figure}
}
"""

_COLOR_BOXES = r"""
\usepackage{tcolorbox}
\tcbuselibrary{skins, breakable}
\newtcolorbox{notebox}[1][]{colback=blue!5!white, colframe=blue!60!black, fonttitle=\bfseries, breakable, title=Note, #1}
\newtcolorbox{warnbox}[1][]{colback=red!5!white, colframe=red!60!black, fonttitle=\bfseries, breakable, title=Warning, #1}
\newtcolorbox{summarybox}[1][]{colback=green!5!white, colframe=green!50!black, fonttitle=\bfseries, breakable, title=Summary, #1}
"""

_SECTION_PAGE_BREAK = r"""
\let\oldsection\section
\renewcommand{\section}{\clearpage\oldsection}
"""

_DOUBLE_SPACING = r"""
\usepackage{setspace}
\doublespacing
"""

# Assembly order. select_fragments() walks this order too.
FRAGMENTS: dict[str, str] = {
    "base_packages": _BASE_PACKAGES,
    "math_packages": _MATH_PACKAGES,
    "math_environments": _MATH_ENVIRONMENTS,
    "hyperref": _HYPERREF,
    "tikz": _TIKZ,
    "watermark": _WATERMARK,
    "bracket_shorthand": _BRACKET_SHORTHAND,
    "no_indent": _NO_INDENT,
    "images": _IMAGES,
    "color_boxes": _COLOR_BOXES,
    "section_page_break": _SECTION_PAGE_BREAK,
    "double_spacing": _DOUBLE_SPACING,
}

# ── Body skeleton ───────────────────────────────────────────────

_LATEX_ESCAPES = {
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
    "\\": r"\textbackslash{}",
}


def escape_latex(text: str) -> str:
    """Escape LaTeX special characters in user-supplied text."""
    return "".join(_LATEX_ESCAPES.get(char, char) for char in text)


def body_skeleton(title: str, author: str) -> str:
    """Cover page, table of contents, page-numbering reset, closing marker."""
    lines = [
        r"\begin{document}",
        "",
        r"\begin{titlepage}",
        r"    \centering",
        r"    \vspace*{\fill}",
        rf"    {{\Huge\bfseries {escape_latex(title)} \par}}",
        r"    \vspace{1.5cm}",
        rf"    {{\Large {escape_latex(author)} \par}}",
        r"    \vspace{1cm}",
        r"    {\large \today \par}",
        r"    \vspace*{\fill}",
        r"\end{titlepage}",
        "",
        r"\pagenumbering{roman}",
        r"\tableofcontents",
        r"\newpage",
        r"\pagenumbering{arabic}",
        r"\setcounter{page}{1}",
        "",
        r"\section{Introduction}",
        "",
        r"\end{document}",
    ]
    return "\n".join(lines) + "\n"


def fragment_names() -> list[str]:
    """Return the names of all selectable fragments in assembly order."""
    return list(FRAGMENTS)


def get_fragment(name: str) -> str:
    """Look up a preamble or feature fragment by name.

    Raises:
        KeyError: If no fragment has that name.
    """
    if name in PREAMBLES:
        return PREAMBLES[name]
    return FRAGMENTS[name]
