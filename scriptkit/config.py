"""Optional YAML config: script dialect, repo marker, default root and output paths."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError

DEFAULT_CONFIG_NAME = "scriptkit.yaml"

_STR_KEYS = ("extension", "comment_marker", "help_open", "help_close", "fence_language", "repo_marker")


@dataclass
class Config:
    """Settings shared by the extractors and the repo walkers."""

    extension: str = ".ps1"
    comment_marker: str = "#"
    help_open: str = "<#"
    help_close: str = "#>"
    fence_language: str = "powershell"
    repo_marker: str = ".git"
    root: Path | None = None  # walkers fall back to "." when unset
    pull_args: list[str] = field(default_factory=lambda: ["pull"])
    comments_markdown: Path = Path("ScriptComments.md")
    comments_html: Path = Path("ScriptComments.html")
    help_markdown: Path = Path("FunctionHelp.md")
    help_html: Path = Path("FunctionHelp.html")
    title: str | None = None

    def __post_init__(self) -> None:
        for name in _STR_KEYS:
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigError(f"{name} must be a string, got {type(value).__name__}")
        if self.title is not None and not isinstance(self.title, str):
            raise ConfigError(f"title must be a string, got {type(self.title).__name__}")
        if not self.extension.startswith("."):
            self.extension = "." + self.extension
        for name in ("comment_marker", "help_open", "help_close", "repo_marker"):
            if not getattr(self, name):
                raise ConfigError(f"{name} must not be empty")
        if isinstance(self.pull_args, str):
            self.pull_args = self.pull_args.split()
        if not isinstance(self.pull_args, list) or not all(isinstance(a, str) for a in self.pull_args):
            raise ConfigError("pull_args must be a string or a list of strings")
        if not self.pull_args:
            raise ConfigError("pull_args must name at least one git argument")
        for name in ("comments_markdown", "comments_html", "help_markdown", "help_html"):
            setattr(self, name, Path(getattr(self, name)))
        if self.root is not None:
            self.root = Path(self.root)


_PATH_KEYS = {"root", "comments_markdown", "comments_html", "help_markdown", "help_html"}


def config_from_dict(data: dict[str, Any]) -> Config:
    """Build Config from a dict (e.g. parsed YAML); unknown keys are rejected."""
    known = {f.name for f in fields(Config)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")
    values: dict[str, Any] = {}
    for key, value in data.items():
        if value is None:
            continue
        if key in _PATH_KEYS:
            value = Path(str(value)).expanduser()
        values[key] = value
    return Config(**values)


def load_config(path: Path | None = None) -> Config:
    """
    Load config from path, or from ./scriptkit.yaml when path is None.
    Missing default file means built-in defaults; a missing explicit file is an error.
    """
    if path is None:
        path = Path(DEFAULT_CONFIG_NAME)
        if not path.exists():
            return Config()
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")
    return config_from_dict(data)
