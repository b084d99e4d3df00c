"""Structured records for extracted docs and walked repositories."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

NO_HELP_SENTINEL = "No help block found."


@dataclass
class ScriptFile:
    """A script read once for extraction (text already newline-normalized)."""

    path: Path
    text: str = ""

    @property
    def lines(self) -> list[str]:
        """Lines split on line feeds only; a final newline adds no empty line."""
        lines = self.text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines


@dataclass
class CommentBlock:
    """Leading run of comment lines in one file, markers intact."""

    source: Path
    lines: list[str] = field(default_factory=list)


@dataclass
class FunctionRecord:
    name: str
    help_text: str
    source_file: Path


@dataclass
class RepositoryEntry:
    """Immediate subdirectory of a walk root."""

    path: Path
    is_repository: bool = False

    @property
    def name(self) -> str:
        return self.path.name


@dataclass
class RenderedDocument:
    """Markdown + HTML text for one extraction run."""

    markdown: str
    html: str

    def write(self, markdown_path: Path, html_path: Path) -> None:
        """Overwrite both outputs (UTF-8)."""
        Path(markdown_path).write_text(self.markdown, encoding="utf-8")
        Path(html_path).write_text(self.html, encoding="utf-8")


@dataclass
class ExtractionReport:
    """What an extractor wrote and which files it had to skip."""

    markdown_path: Path
    html_path: Path
    sections: int = 0
    skipped: list[tuple[Path, str]] = field(default_factory=list)


class PullOutcome(str, Enum):
    UPDATED = "UPDATED"
    FAILED = "FAILED"
    SKIPPED = "SKIPPED"


class RepoStatus(str, Enum):
    CLEAN = "CLEAN"
    DIRTY = "DIRTY"
    FAILED = "FAILED"


@dataclass
class PullResult:
    entry: RepositoryEntry
    outcome: PullOutcome
    output: str = ""
    returncode: Optional[int] = None  # None when skipped


@dataclass
class StatusResult:
    entry: RepositoryEntry
    status: RepoStatus
    changes: list[str] = field(default_factory=list)  # porcelain lines
