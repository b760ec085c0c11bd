"""Root directory configuration for man_files.

This module resolves the home directory and builds the set of man page
root directories that are scanned. There is no configuration file; the
roots are fixed relative to the user's home directory.
"""

from pathlib import Path

# Relative to the home directory. The ".." is kept as-is in printed paths.
BASE_MAN_SUBPATH = Path("..", "usr", "share", "man")
FISH_MAN_SUBPATH = Path("..", "usr", "share", "fish", "man")


class HomeDirectoryError(Exception):
    """Raised when the home directory cannot be determined."""

    pass


def get_home_dir() -> Path:
    """Get the current user's home directory.

    Returns:
        Path object pointing to the home directory.

    Raises:
        HomeDirectoryError: If the host environment has no resolvable home.
    """
    try:
        return Path.home()
    except RuntimeError as e:
        raise HomeDirectoryError(str(e)) from e


def get_base_man_dir(home: Path) -> Path:
    """Get the base man directory, which is always scanned."""
    return home / BASE_MAN_SUBPATH


def get_fish_man_dir(home: Path) -> Path:
    """Get the fish shell man directory, scanned only on request."""
    return home / FISH_MAN_SUBPATH


def get_man_roots(home: Path, fishpath: bool = False) -> list[Path]:
    """
    Build the ordered list of root directories to scan.

    The base man directory always comes first. The fish man directory is
    appended when fishpath is set.

    Args:
        home: The home directory the roots are relative to.
        fishpath: Whether to include the fish man directory.

    Returns:
        List of root directory paths in scan order.
    """
    roots = [get_base_man_dir(home)]
    if fishpath:
        roots.append(get_fish_man_dir(home))
    return roots
