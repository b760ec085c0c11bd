"""Man page file discovery.

Files are found exactly two levels below a root: the root's immediate
subdirectories (man1, man3, ...) are listed, then the regular files
directly inside each of them. Entries are yielded in the order the
filesystem lists them, which is not sorted and may differ between
filesystems.
"""

from collections.abc import Iterator
from pathlib import Path


def _list_dir(directory: Path) -> list[Path]:
    """List a directory, treating a missing or unreadable one as empty."""
    try:
        return list(directory.iterdir())
    except OSError:
        return []


def _is_dir(item: Path) -> bool:
    try:
        return item.is_dir()
    except OSError:
        return False


def _is_file(item: Path) -> bool:
    try:
        return item.is_file()
    except OSError:
        return False


def list_subdirectories(root: Path) -> list[Path]:
    """
    List the immediate subdirectories of a root directory.

    Args:
        root: The man root directory.

    Returns:
        Subdirectory paths in filesystem order. Empty if root does not exist.
    """
    return [item for item in _list_dir(root) if _is_dir(item)]


def iter_man_files(root: Path) -> Iterator[Path]:
    """
    Iterate over the regular files one level inside each subdirectory of root.

    Files directly in root and files nested deeper than one level below a
    subdirectory are not visited.

    Args:
        root: The man root directory.

    Yields:
        File paths, lazily, as the traversal proceeds.
    """
    for subdir in list_subdirectories(root):
        for item in _list_dir(subdir):
            if _is_file(item):
                yield item


def count_man_files(root: Path) -> int:
    """Count the files iter_man_files would yield for root."""
    total = 0
    for _ in iter_man_files(root):
        total += 1
    return total
