"""Output modes and line formatting for man_files."""

from enum import Enum
from pathlib import Path


class OutputMode(Enum):
    """What is printed for the files that are found."""

    PATH = "path"  # Full path of each file
    NAME = "name"  # Base name of each file
    COUNT = "count"  # One summary line per root, after traversal


def select_mode(count: bool, names: bool) -> OutputMode:
    """
    Pick the output mode from the command-line flags.

    Priority is COUNT > NAME > PATH, so passing both --count and --names
    gives COUNT.

    Args:
        count: Whether --count was given.
        names: Whether --names was given.

    Returns:
        The selected OutputMode.
    """
    if count:
        return OutputMode.COUNT
    if names:
        return OutputMode.NAME
    return OutputMode.PATH


def format_file(path: Path, mode: OutputMode) -> str:
    """Format a single file for PATH or NAME mode."""
    if mode is OutputMode.NAME:
        return path.name
    if mode is OutputMode.PATH:
        return str(path)
    raise ValueError(f"Per-file output is not used in {mode.value} mode")


def format_summary(root: Path, total: int) -> str:
    """Format the COUNT mode summary line for a root."""
    return f"{root} contains {total} files."
