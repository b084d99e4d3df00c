"""Git fleet helpers — pull or status-check every repo directly under a root."""

from __future__ import annotations

import os
import subprocess
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import Config
from .errors import GitNotFoundError
from .models import PullOutcome, PullResult, RepoStatus, RepositoryEntry, StatusResult

STATUS_ARGS = ["status", "--porcelain"]


@contextmanager
def working_directory(path: Path) -> Iterator[Path]:
    """chdir into path for the block; the previous cwd is restored on every exit."""
    previous = os.getcwd()
    os.chdir(path)
    try:
        yield Path(path)
    finally:
        os.chdir(previous)


def _check_root(root: Path) -> Path:
    root = Path(root)
    if not root.exists():
        raise FileNotFoundError(f"Root directory not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")
    return root.resolve()


def is_repository(path: Path, marker: str = ".git") -> bool:
    """True if path directly contains the marker directory."""
    return (Path(path) / marker).is_dir()


def iter_entries(root: Path, marker: str = ".git") -> Iterator[RepositoryEntry]:
    """Immediate subdirectories of root, sorted by name, each tagged repo / not repo."""
    root = _check_root(root)
    for child in sorted(root.iterdir(), key=lambda p: p.name):
        if child.is_dir():
            yield RepositoryEntry(path=child, is_repository=is_repository(child, marker))


def run_git(args: list[str], repo: Path, merge_stderr: bool = False) -> subprocess.CompletedProcess:
    """Run git with args inside repo. merge_stderr folds progress text on stderr into stdout."""
    with working_directory(repo):
        try:
            if merge_stderr:
                return subprocess.run(
                    ["git", *args],
                    stdout=subprocess.PIPE,
                    stderr=subprocess.STDOUT,
                    text=True,
                )
            return subprocess.run(["git", *args], capture_output=True, text=True)
        except FileNotFoundError as e:
            raise GitNotFoundError("git executable not found on PATH") from e


def pull_repo(entry: RepositoryEntry, config: Config | None = None) -> PullResult:
    """Pull one repo; success or failure is decided by exit status only."""
    config = config or Config()
    if not entry.is_repository:
        return PullResult(entry=entry, outcome=PullOutcome.SKIPPED)
    result = run_git(list(config.pull_args), entry.path, merge_stderr=True)
    outcome = PullOutcome.UPDATED if result.returncode == 0 else PullOutcome.FAILED
    return PullResult(entry=entry, outcome=outcome, output=result.stdout or "", returncode=result.returncode)


def pull_all(root: Path, config: Config | None = None) -> Iterator[PullResult]:
    """
    Yield a PullResult for every subdirectory of root, in name order.
    Non-repos come back SKIPPED; a failed pull never stops the walk.
    """
    config = config or Config()
    for entry in iter_entries(root, config.repo_marker):
        yield pull_repo(entry, config)


def classify_status(output: str) -> tuple[RepoStatus, list[str]]:
    """Empty porcelain output is CLEAN; any change line makes it DIRTY."""
    changes = [ln for ln in output.splitlines() if ln.strip()]
    return (RepoStatus.DIRTY if changes else RepoStatus.CLEAN), changes


def status_repo(entry: RepositoryEntry) -> StatusResult:
    result = run_git(STATUS_ARGS, entry.path)
    if result.returncode != 0:
        return StatusResult(entry=entry, status=RepoStatus.FAILED)
    status, changes = classify_status(result.stdout or "")
    return StatusResult(entry=entry, status=status, changes=changes)


def status_all(root: Path, config: Config | None = None) -> Iterator[StatusResult]:
    """Yield a StatusResult for each repo under root; non-repos are left out."""
    config = config or Config()
    for entry in iter_entries(root, config.repo_marker):
        if entry.is_repository:
            yield status_repo(entry)
