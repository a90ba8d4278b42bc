"""Filesystem utility functions."""

from pathlib import Path


def ensure_exists(path: Path, what: str) -> None:
    """
    Check that a path exists, raise FileNotFoundError if not.

    Args:
        path: Path to check
        what: Description of what this path represents (for error message)
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing {what} at: {path}")


def read_lines(path: Path) -> list[str]:
    """Read a UTF-8 text file and return its non-blank lines, stripped."""
    return [line.strip() for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]
