from __future__ import annotations

import stat
from pathlib import Path

import pytest

from mates.config import Configuration
from mates.edit import edit_contact, resolve_edit_target
from mates.errors import AmbiguousQuery, ConfigError, EditorFailed, NoMatch
from mates.storage import IndexStore


def _fake_editor(tmp_path: Path, body: str) -> str:
    script = tmp_path / "fake-editor"
    script.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR)
    return str(script)


def test_resolve_by_query(sample_index):
    assert resolve_edit_target("b@y.com", sample_index) == "/c/2"


def test_resolve_no_match(sample_index):
    with pytest.raises(NoMatch):
        resolve_edit_target("nomatch", sample_index)


def test_resolve_ambiguous(sample_index):
    with pytest.raises(AmbiguousQuery):
        resolve_edit_target(".com", sample_index)


def test_resolve_existing_file_is_returned_unchanged(tmp_path: Path):
    p = tmp_path / "somebody.contact"
    p.write_text("x@y.com\n", encoding="utf-8")
    assert resolve_edit_target(str(p), []) == str(p)


@pytest.fixture
def indexed(vdir: Path, index_path: Path, write_contact):
    ann = write_contact("ann.contact", "ann@example.com\n")
    write_contact("bob.contact", "bob@y.com\nBob\n")
    IndexStore(index_path).build_full(vdir)
    return ann


def test_edit_contact_runs_editor_and_reindexes(tmp_path: Path, vdir: Path, index_path: Path, indexed):
    editor = _fake_editor(tmp_path, "printf 'Ann Edited\\n' >> \"$1\"")
    config = Configuration(vdir_path=vdir, index_path=index_path, editor_cmd=editor)

    assert edit_contact(config, "ann@") == str(indexed)

    ann = [r for r in IndexStore(index_path).load() if r.email == "ann@example.com"]
    assert [r.fullname for r in ann] == ["Ann Edited"]


def test_edit_contact_removes_emptied_file(tmp_path: Path, vdir: Path, index_path: Path, indexed):
    editor = _fake_editor(tmp_path, ': > "$1"')
    config = Configuration(vdir_path=vdir, index_path=index_path, editor_cmd=editor)

    edit_contact(config, str(indexed))

    assert not indexed.exists()
    assert [r.email for r in IndexStore(index_path).load()] == ["bob@y.com"]


def test_edit_contact_editor_failure(tmp_path: Path, vdir: Path, index_path: Path, indexed):
    config = Configuration(vdir_path=vdir, index_path=index_path, editor_cmd=_fake_editor(tmp_path, "exit 3"))

    with pytest.raises(EditorFailed):
        edit_contact(config, "bob")


def test_edit_contact_requires_editor(vdir: Path, index_path: Path, indexed):
    config = Configuration(vdir_path=vdir, index_path=index_path)
    with pytest.raises(ConfigError):
        edit_contact(config, "bob")
