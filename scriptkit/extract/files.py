"""Script discovery and reading shared by both extractors."""

from pathlib import Path

from ..models import ScriptFile


def check_folder(folder: Path) -> Path:
    """Fail before any output is touched if folder is missing or not a directory."""
    folder = Path(folder)
    if not folder.exists():
        raise FileNotFoundError(f"Folder not found: {folder}")
    if not folder.is_dir():
        raise NotADirectoryError(f"Not a directory: {folder}")
    return folder


def list_scripts(folder: Path, extension: str) -> list[Path]:
    """Top-level files in folder with the given extension (non-recursive), sorted by name."""
    ext = extension.lower()
    return sorted(
        (p for p in Path(folder).iterdir() if p.is_file() and p.suffix.lower() == ext),
        key=lambda p: p.name,
    )


def read_script(path: Path) -> ScriptFile:
    """Read a script as UTF-8 (a BOM is dropped). Raises OSError / UnicodeDecodeError."""
    text = Path(path).read_text(encoding="utf-8-sig")
    return ScriptFile(path=Path(path), text=text)


def describe_error(exc: Exception) -> str:
    """Short reason string for a skipped file."""
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc) or type(exc).__name__
