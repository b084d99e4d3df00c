"""CLI entry point — doc extractors and git fleet walkers."""

import json
from pathlib import Path
from typing import Optional

import click
import typer

from . import __version__
from .config import Config, load_config
from .errors import ScriptkitError
from .extract import extract_comment_docs, extract_help_docs
from .fleet import pull_all, status_all
from .format import (
    extraction_summary,
    pull_lines,
    pull_result_dict,
    status_line,
    status_result_dict,
    warning_line,
)
from .models import ExtractionReport


def _err(msg: str) -> None:
    """Print a red error to stderr and exit 1 — used for all CLI errors."""
    typer.echo(click.style(f"Error: {msg}", fg="red"), err=True)
    raise typer.Exit(code=1)


app = typer.Typer(help="Extract script docs and keep a folder of git repos in check.")

_CONFIG_HELP = "YAML config (default: ./scriptkit.yaml if present)"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"scriptkit {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"),
) -> None:
    """Extract script docs and keep a folder of git repos in check."""


def _config(path: Optional[Path]) -> Config:
    try:
        return load_config(path)
    except ScriptkitError as e:
        _err(str(e))


def _root(root: Optional[Path], config: Config) -> Path:
    """Explicit argument wins, then config root, then the current directory."""
    if root is not None:
        return root
    if config.root is not None:
        return config.root
    return Path(".")


def _report(report: ExtractionReport, noun: str) -> None:
    for path, reason in report.skipped:
        typer.echo(warning_line(path, reason), err=True)
    typer.echo(extraction_summary(report, noun))


@app.command("comments")
def comments_cmd(
    folder: Path = typer.Argument(..., help="Folder of scripts (top level only)"),
    markdown: Optional[Path] = typer.Option(None, "--output", "-o", help="Markdown output path"),
    html: Optional[Path] = typer.Option(None, "--html", help="HTML output path"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
) -> None:
    """Render each script's leading comment block to Markdown and HTML."""
    config = _config(config_path)
    try:
        report = extract_comment_docs(folder, markdown, html, config)
    except OSError as e:
        _err(str(e))
    _report(report, "file")


@app.command("helpdocs")
def helpdocs_cmd(
    path: Path = typer.Argument(..., help="Script file, or folder of scripts"),
    markdown: Optional[Path] = typer.Option(None, "--output", "-o", help="Markdown output path"),
    html: Optional[Path] = typer.Option(None, "--html", help="HTML output path"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
) -> None:
    """Render every function's help block to one Markdown and one HTML document."""
    config = _config(config_path)
    try:
        report = extract_help_docs(path, markdown, html, config)
    except OSError as e:
        _err(str(e))
    _report(report, "function")


@app.command("pull")
def pull_cmd(
    root: Optional[Path] = typer.Argument(None, file_okay=False, help="Dir of repos (default: config root or .)"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    json_out: bool = typer.Option(False, "--json", "-j", help="JSON output"),
) -> None:
    """Run git pull in every repo directly under ROOT."""
    config = _config(config_path)
    results = []
    try:
        for result in pull_all(_root(root, config), config):
            if json_out:
                results.append(pull_result_dict(result))
                continue
            for line in pull_lines(result):
                typer.echo(line)
    except (OSError, ScriptkitError) as e:
        _err(str(e))
    if json_out:
        typer.echo(json.dumps(results, indent=2))


@app.command("status")
def status_cmd(
    root: Optional[Path] = typer.Argument(None, file_okay=False, help="Dir of repos (default: config root or .)"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    json_out: bool = typer.Option(False, "--json", "-j", help="JSON output"),
) -> None:
    """Print CLEAN or DIRTY for every repo directly under ROOT."""
    config = _config(config_path)
    results = []
    try:
        for result in status_all(_root(root, config), config):
            if json_out:
                results.append(status_result_dict(result))
                continue
            typer.echo(status_line(result))
    except (OSError, ScriptkitError) as e:
        _err(str(e))
    if json_out:
        typer.echo(json.dumps(results, indent=2))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
