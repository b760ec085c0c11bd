"""Shared pytest fixtures and test utilities for man_files."""

from pathlib import Path

import pytest
from click.testing import CliRunner
from pytest import MonkeyPatch

from man_files.config import get_base_man_dir, get_fish_man_dir


@pytest.fixture(autouse=True, scope="function")
def isolate_home(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Automatically point the home directory at a temporary location.

    This fixture runs automatically for every test and ensures that tests
    never scan the real man directories of the machine running them.
    The man roots resolve to <tmp_path>/usr/share/man and
    <tmp_path>/usr/share/fish/man.

    Args:
        tmp_path: Pytest temporary directory for this test.
        monkeypatch: Pytest monkeypatch fixture for setting environment variables.

    Returns:
        Path: The isolated home directory for the test.
    """
    home = tmp_path / "home"
    home.mkdir(exist_ok=True)
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI runner for testing commands.

    Returns:
        CliRunner: A Click test runner instance.
    """
    return CliRunner()


def create_man_tree(root: Path, layout: dict[str, list[str]]) -> list[Path]:
    """Create man section directories and files under a root.

    Args:
        root: The man root directory (created if missing).
        layout: Mapping of section directory name to file names inside it.

    Returns:
        List of the created file paths.
    """
    root.mkdir(parents=True, exist_ok=True)
    created = []
    for section, file_names in layout.items():
        section_dir = root / section
        section_dir.mkdir(exist_ok=True)
        for file_name in file_names:
            file_path = section_dir / file_name
            file_path.write_text(f".TH {file_name}\n")
            created.append(file_path)
    return created


@pytest.fixture
def base_man_dir(isolate_home: Path) -> Path:
    """Provide the base man directory for the isolated home (not created)."""
    return get_base_man_dir(isolate_home)


@pytest.fixture
def fish_man_dir(isolate_home: Path) -> Path:
    """Provide the fish man directory for the isolated home (not created)."""
    return get_fish_man_dir(isolate_home)


@pytest.fixture
def sample_base_tree(base_man_dir: Path) -> list[Path]:
    """Create the standard base fixture: man1/{a.1,b.1} and man3/{c.3}.

    Returns:
        list[Path]: The three created file paths.
    """
    return create_man_tree(base_man_dir, {"man1": ["a.1", "b.1"], "man3": ["c.3"]})
