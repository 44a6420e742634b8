"""
Logging for texscaffold runs.

``cli()`` calls ``setup_logging`` once before any command runs. The level
comes from ``-q``/``-v``/``--debug``, then ``TEXSCAFFOLD_LOG_LEVEL``, and is
WARNING otherwise.

Records always go to stderr. ``preview`` prints the document on stdout and
``--json`` prints a report there, and a log line mixed into either would
break a redirect like ``texscaffold preview > paper.tex``.

``TEXSCAFFOLD_LOG_FILE`` adds a file handler that keeps full detail, for
example to see which fragments were selected and where the editor config
was merged, without making the terminal noisy.
"""

from __future__ import annotations

import logging
import sys

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d - %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"

# (highest level the entry applies to, format, datefmt), most detailed first
_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d - %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
)
# Warnings and errors read like the CLI's own messages
_CONSOLE_PLAIN = "%(message)s"


def _console_formatter(level: int) -> logging.Formatter:
    for threshold, fmt, datefmt in _CONSOLE_FORMATS:
        if level <= threshold:
            return logging.Formatter(fmt, datefmt=datefmt)
    return logging.Formatter(_CONSOLE_PLAIN)


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Route texscaffold's log records to stderr and, optionally, a file.

    Safe to call more than once; earlier handlers are replaced.

    Args:
        level: Console level name. Unknown names fall back to WARNING.
        log_file: Path of an extra log file, or None.
        log_file_level: Level for the file. Defaults to ``level``.
    """
    console_level = _parse_level(level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(_console_formatter(console_level))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setLevel(file_level)
        handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
        root.addHandler(handler)
        root_level = min(root_level, file_level)

    # the root must let through whatever the most verbose handler wants
    root.setLevel(root_level)

    # a failing handler must not turn a finished scaffold into a traceback
    logging.raiseExceptions = False


def _parse_level(level: str | None) -> int:
    """Level name to number; WARNING for anything unrecognised."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING
