"""Shared test fixtures."""

from datetime import date, datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from odt_creator.ports.launcher import LauncherPort
from odt_creator.ports.writer import DocumentWriterPort


@pytest.fixture
def today() -> date:
    """A Friday in June 2025."""
    return date(2025, 6, 13)


@pytest.fixture
def fixed_created() -> datetime:
    """Pinned creation timestamp for meta.xml."""
    return datetime(2025, 6, 13, 0, 0, 0)


@pytest.fixture
def mock_writer() -> MagicMock:
    """Mock writer port returning the requested path."""
    mock = MagicMock(spec=DocumentWriterPort)
    mock.write.side_effect = lambda path: path
    return mock


@pytest.fixture
def mock_launcher() -> MagicMock:
    """Mock launcher port reporting a started viewer."""
    mock = MagicMock(spec=LauncherPort)
    mock.launch.return_value = True
    return mock


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Config file pointing the output root into tmp_path."""
    output_root = tmp_path / "out"
    path = tmp_path / "config.toml"
    path.write_text(
        "[paths]\n"
        f'output_root = "{output_root.as_posix()}"\n'
        "\n"
        "[document]\n"
        'creation_date = "2025-06-13T00:00:00"\n'
    )
    return path
