"""Console lines for walkers and extractors — colors via click.style."""

from __future__ import annotations

from pathlib import Path

import click

from .models import ExtractionReport, PullOutcome, PullResult, RepoStatus, StatusResult

_STATUS_COLORS = {
    RepoStatus.CLEAN: "green",
    RepoStatus.DIRTY: "yellow",
    RepoStatus.FAILED: "red",
}


def status_line(result: StatusResult) -> str:
    """e.g. 'CLEAN : repoA' (colored)."""
    return click.style(f"{result.status.value} : {result.entry.name}", fg=_STATUS_COLORS[result.status])


def pull_lines(result: PullResult) -> list[str]:
    """Header, git's own output, and a failure notice when the pull exited non-zero."""
    name = result.entry.name
    if result.outcome == PullOutcome.SKIPPED:
        return [click.style(f"Skipping {name} (not a git repository)", dim=True)]
    lines = [click.style(f"==> {name}", bold=True)]
    output = result.output.rstrip()
    if output:
        lines.append(output)
    if result.outcome == PullOutcome.FAILED:
        lines.append(click.style(f"Pull failed: {name} (exit {result.returncode})", fg="red"))
    return lines


def warning_line(path: Path, reason: str) -> str:
    return click.style(f"Warning: could not read {path}: {reason}", fg="yellow")


def extraction_summary(report: ExtractionReport, noun: str = "section") -> str:
    plural = noun if report.sections == 1 else noun + "s"
    text = (
        f"Wrote {report.sections} {plural}:\n"
        f"  Markdown: {report.markdown_path}\n"
        f"  HTML:     {report.html_path}"
    )
    return click.style(text, fg="green")


def pull_result_dict(result: PullResult) -> dict:
    return {
        "name": result.entry.name,
        "path": str(result.entry.path),
        "outcome": result.outcome.value,
        "returncode": result.returncode,
        "output": result.output,
    }


def status_result_dict(result: StatusResult) -> dict:
    return {
        "name": result.entry.name,
        "path": str(result.entry.path),
        "status": result.status.value,
        "changes": result.changes,
    }
