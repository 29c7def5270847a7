"""Tests for change file collection and loading."""

import os
from datetime import UTC, datetime
from pathlib import Path

import pytest

from changelet.core.loader import load_changes
from changelet.core.sources import (
    ChangeSource,
    change_file_name,
    collect_sources,
    sanitize_slug,
)
from changelet.errors import (
    ChangeSetError,
    ChangesDirNotFoundError,
    EmptyBodyError,
    InvalidOrMissingKindError,
    MissingFrontMatterError,
    ParseError,
)
from changelet.models import ChangeKind

CREATED = datetime(2026, 5, 1, tzinfo=UTC)


def make_source(text: str, identifier: str = "change.md") -> ChangeSource:
    return ChangeSource(text=text, created_at=CREATED, identifier=identifier)


class TestCollectSources:
    """Tests for collect_sources."""

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(ChangesDirNotFoundError):
            collect_sources(tmp_path / ".changes")

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert collect_sources(tmp_path) == []

    def test_reads_matching_files_in_name_order(self, tmp_path: Path) -> None:
        (tmp_path / "b.md").write_text("B")
        (tmp_path / "a.md").write_text("A")
        (tmp_path / "notes.txt").write_text("ignored")
        (tmp_path / ".hidden.md").write_text("ignored")
        (tmp_path / "config.toml").write_text("[changes]\n")
        (tmp_path / "dir.md").mkdir()

        sources = collect_sources(tmp_path)

        assert [source.text for source in sources] == ["A", "B"]
        assert sources[0].identifier == str(tmp_path / "a.md")

    def test_custom_pattern_skips_config(self, tmp_path: Path) -> None:
        (tmp_path / "one.txt").write_text("1")
        (tmp_path / "config.toml").write_text("")
        sources = collect_sources(tmp_path, "*")
        assert [Path(source.identifier).name for source in sources] == ["one.txt"]

    def test_created_at_is_mtime(self, tmp_path: Path) -> None:
        path = tmp_path / "a.md"
        path.write_text("A")
        os.utime(path, (1_700_000_000, 1_700_000_000))

        (source,) = collect_sources(tmp_path)

        assert source.created_at == datetime.fromtimestamp(1_700_000_000, tz=UTC)

    def test_non_utf8_file(self, tmp_path: Path) -> None:
        (tmp_path / "bad.md").write_bytes(b"\xff\xfe\x00bad")

        (source,) = collect_sources(tmp_path)

        assert source.text == ""
        assert isinstance(source.error, ParseError)
        assert source.error.source.endswith("bad.md")


class TestLoadChanges:
    """Tests for load_changes."""

    def test_loads_in_source_order(self) -> None:
        records = load_changes(
            [
                make_source("---\nkind: fixed\n---\nOne\n", "1.md"),
                make_source("---\nkind: added\n---\nTwo\n", "2.md"),
            ]
        )
        assert [record.kind for record in records] == [ChangeKind.FIXED, ChangeKind.ADDED]
        assert [record.source for record in records] == ["1.md", "2.md"]

    def test_no_sources(self) -> None:
        assert load_changes([]) == []

    def test_collects_every_error(self) -> None:
        sources = [
            make_source("no front matter", "a.md"),
            make_source("---\nkind: fixed\n---\nfine\n", "b.md"),
            make_source("---\nkind: nope\n---\nbad kind\n", "c.md"),
            make_source("---\nkind: fixed\n---\n", "d.md"),
        ]

        with pytest.raises(ChangeSetError) as exc_info:
            load_changes(sources)

        errors = exc_info.value.errors
        assert [error.source for error in errors] == ["a.md", "c.md", "d.md"]
        assert [type(error) for error in errors] == [
            MissingFrontMatterError,
            InvalidOrMissingKindError,
            EmptyBodyError,
        ]
        assert "3 invalid change files" in str(exc_info.value)

    def test_undecodable_file_reported_with_other_errors(self, tmp_path: Path) -> None:
        (tmp_path / "a.md").write_bytes(b"---\nkind: fixed\n---\n\xff\xfe body\n")
        (tmp_path / "b.md").write_text("---\nkind: nope\n---\nx\n")

        with pytest.raises(ChangeSetError) as exc_info:
            load_changes(collect_sources(tmp_path))

        errors = exc_info.value.errors
        assert [Path(error.source).name for error in errors] == ["a.md", "b.md"]
        assert errors[0].message == "file is not valid UTF-8"
        assert isinstance(errors[1], InvalidOrMissingKindError)

    def test_undecodable_file_fails_fast(self, tmp_path: Path) -> None:
        (tmp_path / "a.md").write_bytes(b"\xff\xfe")
        (tmp_path / "b.md").write_text("---\nkind: nope\n---\nx\n")

        with pytest.raises(ParseError) as exc_info:
            load_changes(collect_sources(tmp_path), fail_fast=True)

        assert Path(exc_info.value.source).name == "a.md"

    def test_fail_fast_raises_first_error(self) -> None:
        sources = [
            make_source("---\nkind: fixed\n---\nfine\n", "a.md"),
            make_source("no front matter", "b.md"),
            make_source("---\nkind: nope\n---\nx\n", "c.md"),
        ]

        with pytest.raises(MissingFrontMatterError) as exc_info:
            load_changes(sources, fail_fast=True)

        assert exc_info.value.source == "b.md"


class TestNaming:
    """Tests for change file naming."""

    def test_sanitize_slug(self) -> None:
        assert sanitize_slug("Fix: crash on  start!") == "fix-crash-on-start"

    def test_sanitize_slug_empty(self) -> None:
        assert sanitize_slug("!!!") == "change"

    def test_sanitize_slug_truncates(self) -> None:
        slug = sanitize_slug("word " * 30)
        assert len(slug) <= 50
        assert not slug.endswith("-")

    def test_change_file_name(self) -> None:
        name = change_file_name("Add JSON output", datetime(2026, 1, 4, 12, 0, 5))
        assert name == "20260104-120005-add-json-output.md"
