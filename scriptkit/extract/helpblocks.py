"""Help-block extractor — every `function name { ... }` and its <# ... #> help."""

from __future__ import annotations

import re
from pathlib import Path

from ..config import Config
from ..models import NO_HELP_SENTINEL, ExtractionReport, FunctionRecord
from ..render import render_functions
from .files import describe_error, list_scripts, read_script

# Body ends at the first "}" in column zero; nested braces there end it early.
FUNCTION_RE = re.compile(r"function\s+([A-Za-z0-9_-]+)\s*\{(.*?)^\}", re.DOTALL | re.MULTILINE)


def resolve_inputs(path: Path, extension: str) -> list[Path]:
    """A single file, or the top-level scripts of a directory."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Path not found: {path}")
    if path.is_dir():
        return list_scripts(path, extension)
    return [path]


def _help_pattern(open_marker: str, close_marker: str) -> re.Pattern[str]:
    return re.compile(re.escape(open_marker) + r"(.*?)" + re.escape(close_marker), re.DOTALL)


def extract_help(body: str, open_marker: str = "<#", close_marker: str = "#>") -> str:
    """Trimmed text of the first delimited help region, or the no-help sentinel."""
    m = _help_pattern(open_marker, close_marker).search(body)
    if m is None:
        return NO_HELP_SENTINEL
    return m.group(1).strip()


def find_functions(text: str, source: Path, config: Config | None = None) -> list[FunctionRecord]:
    """One record per non-overlapping function match, in text order."""
    config = config or Config()
    return [
        FunctionRecord(
            name=m.group(1),
            help_text=extract_help(m.group(2), config.help_open, config.help_close),
            source_file=Path(source),
        )
        for m in FUNCTION_RE.finditer(text)
    ]


def collect_functions(paths: list[Path], config: Config | None = None) -> tuple[list[FunctionRecord], list[tuple[Path, str]]]:
    """Records across paths in order; unreadable files are skipped with a reason."""
    config = config or Config()
    records: list[FunctionRecord] = []
    skipped: list[tuple[Path, str]] = []
    for path in paths:
        try:
            script = read_script(path)
        except (OSError, UnicodeDecodeError) as e:
            skipped.append((path, describe_error(e)))
            continue
        records.extend(find_functions(script.text, path, config))
    return records, skipped


def extract_help_docs(
    path: Path,
    markdown_path: Path | None = None,
    html_path: Path | None = None,
    config: Config | None = None,
) -> ExtractionReport:
    """Write help for every function found under path to one Markdown and one HTML file."""
    config = config or Config()
    markdown_path = Path(markdown_path or config.help_markdown)
    html_path = Path(html_path or config.help_html)
    inputs = resolve_inputs(path, config.extension)
    records, skipped = collect_functions(inputs, config)
    title = config.title or f"Function help: {Path(path).resolve().name}"
    doc = render_functions(records, title, config.fence_language)
    doc.write(markdown_path, html_path)
    return ExtractionReport(markdown_path=markdown_path, html_path=html_path, sections=len(records), skipped=skipped)
