"""
texscaffold — CLI entrypoint.

Usage:
    texscaffold --help
    texscaffold new
    texscaffold new --answers answers.yml --force
    texscaffold preview --answers answers.yml
    texscaffold config check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from texscaffold import __version__
from texscaffold.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="texscaffold")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to texscaffold.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """texscaffold — generate a LaTeX document skeleton from a few questions."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("TEXSCAFFOLD_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("TEXSCAFFOLD_LOG_FILE"),
        log_file_level=os.environ.get("TEXSCAFFOLD_LOG_FILE_LEVEL"),
    )


def _load_config_or_exit(ctx: click.Context):
    from texscaffold.core.config.loader import ConfigError, load_config

    try:
        return load_config(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


def _collect_answers(config, answers_path: str | None, *, prompt_to_stderr: bool = False):
    """Answers from a file if given, else from the questionnaire.

    Commands whose stdout is machine-readable set ``prompt_to_stderr``.
    """
    from texscaffold.core.config.loader import ConfigError, load_answers
    from texscaffold.ui.cli.questionnaire import ask_answers

    if answers_path is None:
        return ask_answers(config.defaults, err=prompt_to_stderr)

    try:
        return load_answers(Path(answers_path), config)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


# ── New ─────────────────────────────────────────────────────────


@cli.command()
@click.option(
    "--answers", "-a", "answers_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="YAML file with answers (skips the questionnaire).",
)
@click.option(
    "--dir", "-d", "out_dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Output directory (default: current directory).",
)
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing .tex file without asking.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def new(
    ctx: click.Context,
    answers_path: str | None,
    out_dir: str | None,
    force: bool,
    as_json: bool,
) -> None:
    """Ask about the document, then write the .tex file (and editor config)."""
    from texscaffold.core.use_cases.scaffold import run_scaffold

    config = _load_config_or_exit(ctx)
    answers = _collect_answers(config, answers_path, prompt_to_stderr=as_json)
    root = Path(out_dir) if out_dir else Path.cwd()

    overwrite = force
    target = root / answers.tex_filename
    if target.exists() and not force and not as_json:
        overwrite = click.confirm(f"{target} already exists. Overwrite?", default=False)

    result = run_scaffold(answers, root, overwrite=overwrite, config=config)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    quiet = ctx.obj.get("quiet", False)

    if result.document_written:
        click.secho(f"✅ Created {result.document_path}", fg="green")
    elif result.document_skipped:
        click.secho(f"⊘ Skipped {result.document_path} (already exists)", fg="yellow")
    else:
        click.secho(f"❌ Failed to write {result.document_path}", fg="red")
        click.echo(f"   {result.document_error}")

    if result.editor_config_action:
        verb = "Created" if result.editor_config_action == "created" else "Updated"
        click.secho(f"✅ {verb} {result.editor_config_path}", fg="green")
    elif result.editor_config_error:
        click.secho(f"❌ {result.editor_config_error}", fg="red")

    if not quiet and result.document_written:
        click.echo()
        click.echo(f"   Title:    {answers.title}")
        click.echo(f"   Author:   {answers.author}")
        click.echo(f"   Language: {answers.language.value}")

    if not result.ok:
        sys.exit(1)


# ── Preview ─────────────────────────────────────────────────────


@cli.command()
@click.option(
    "--answers", "-a", "answers_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="YAML file with answers (skips the questionnaire).",
)
@click.pass_context
def preview(ctx: click.Context, answers_path: str | None) -> None:
    """Print the generated .tex source without writing anything."""
    from texscaffold.core.services.generators.document import assemble_document

    config = _load_config_or_exit(ctx)
    answers = _collect_answers(config, answers_path, prompt_to_stderr=True)
    click.echo(assemble_document(answers), nl=False)


# ── Fragments ───────────────────────────────────────────────────


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def fragments(as_json: bool) -> None:
    """List the optional document fragments in assembly order."""
    from texscaffold.core.services.generators.fragments import PREAMBLES, fragment_names

    names = fragment_names()

    if as_json:
        click.echo(json.dumps({"preambles": list(PREAMBLES), "fragments": names}, indent=2))
        return

    click.secho("📄 Preambles:", fg="cyan", bold=True)
    for name in PREAMBLES:
        click.echo(f"   • {name}")
    click.secho(f"🧩 Fragments ({len(names)}):", fg="cyan", bold=True)
    for i, name in enumerate(names, 1):
        click.echo(f"   {i:>2}. {name}")


# ── Config ──────────────────────────────────────────────────────


@cli.group()
def config() -> None:
    """texscaffold.yml configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate texscaffold.yml configuration."""
    from texscaffold.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.config is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        if result.config_path:
            click.echo(f"   File: {result.config_path}")
        overrides = result.config.defaults.overrides()
        click.echo(f"   Default overrides: {len(overrides)}")
        langs = ", ".join(lang.value for lang in result.config.editor_config.languages) or "none"
        click.echo(f"   Editor config for: {langs}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)


if __name__ == "__main__":
    cli()
