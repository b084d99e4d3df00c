"""Comment-block extractor — each script's leading run of comment lines."""

from __future__ import annotations

from pathlib import Path

from ..config import Config
from ..models import CommentBlock, ExtractionReport, RenderedDocument
from ..render import render_comment_blocks
from .files import check_folder, describe_error, list_scripts, read_script


def extract_comment_block(lines: list[str], marker: str = "#") -> list[str]:
    """
    Leading lines whose trimmed text starts with marker, kept as written.
    Stops at the first other line (blank lines included); empty if the file opens with code.
    """
    block: list[str] = []
    for line in lines:
        stripped = line.strip()
        if not stripped.startswith(marker):
            break
        block.append(line)
    return block


def build_comment_docs(folder: Path, config: Config | None = None) -> tuple[RenderedDocument, int, list[tuple[Path, str]]]:
    """Render one section per readable script; returns (document, sections, skipped)."""
    config = config or Config()
    folder = check_folder(folder)
    blocks: list[CommentBlock] = []
    skipped: list[tuple[Path, str]] = []
    for path in list_scripts(folder, config.extension):
        try:
            script = read_script(path)
        except (OSError, UnicodeDecodeError) as e:
            skipped.append((path, describe_error(e)))
            continue
        blocks.append(CommentBlock(source=path, lines=extract_comment_block(script.lines, config.comment_marker)))
    title = config.title or f"Script comments: {folder.resolve().name}"
    doc = render_comment_blocks(blocks, title, config.fence_language)
    return doc, len(blocks), skipped


def extract_comment_docs(
    folder: Path,
    markdown_path: Path | None = None,
    html_path: Path | None = None,
    config: Config | None = None,
) -> ExtractionReport:
    """Write the leading comment block of every script in folder to Markdown and HTML."""
    config = config or Config()
    markdown_path = Path(markdown_path or config.comments_markdown)
    html_path = Path(html_path or config.comments_html)
    doc, sections, skipped = build_comment_docs(folder, config)
    doc.write(markdown_path, html_path)
    return ExtractionReport(markdown_path=markdown_path, html_path=html_path, sections=sections, skipped=skipped)
