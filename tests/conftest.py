"""Shared test fixtures for changelet tests."""

import os
from collections.abc import Callable, Generator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from typer.testing import CliRunner

from changelet.models import ChangeKind, ChangeRecord

BASE_TIME = datetime(2026, 1, 4, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a project with an empty .changes directory.

    Changes cwd to the project for the duration of the test.
    """
    (tmp_path / ".changes").mkdir()

    original_cwd = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_cwd)


@pytest.fixture
def write_change(project_dir: Path) -> Callable[..., Path]:
    """Return a helper that writes a change file into .changes."""

    def _write(name: str, content: str) -> Path:
        path = project_dir / ".changes" / name
        path.write_text(content)
        return path

    return _write


def make_record(
    kind: ChangeKind = ChangeKind.FIXED,
    text: str = "Something changed",
    *,
    breaking: bool | None = None,
    priority: int | None = None,
    offset: int = 0,
    source: str = "test.md",
) -> ChangeRecord:
    """Create a change record created ``offset`` seconds after BASE_TIME."""
    return ChangeRecord.from_fields(
        kind=kind.value,
        breaking=breaking,
        priority=priority,
        text=text,
        created_at=BASE_TIME + timedelta(seconds=offset),
        source=source,
    )
