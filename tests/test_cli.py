from __future__ import annotations

import io
from pathlib import Path

import pytest

from mates.cli import main
from mates.storage import IndexStore


@pytest.fixture
def indexed_env(mates_env, write_contact):
    vdir, index_path = mates_env
    write_contact("ann.contact", "a@x.com\nAnn\n")
    assert main(["index"]) == 0
    return vdir, index_path


def test_index_builds_index_file(indexed_env):
    vdir, index_path = indexed_env
    assert index_path.read_text(encoding="utf-8") == f"a@x.com\tAnn\t{vdir / 'ann.contact'}\n"


def test_mutt_query_prints_leading_blank_line(indexed_env, capsys):
    assert main(["mutt-query", "x.com"]) == 0
    assert capsys.readouterr().out == "\na@x.com\tAnn\n"


def test_mutt_query_disable_empty_line(indexed_env, capsys):
    assert main(["mutt-query", "--disable-empty-line", "ANN"]) == 0
    assert capsys.readouterr().out == "a@x.com\tAnn\n"


def test_file_query(indexed_env, capsys):
    vdir, _ = indexed_env
    assert main(["file-query", "ann"]) == 0
    assert capsys.readouterr().out == f"{vdir / 'ann.contact'}\n"


def test_email_query(indexed_env, capsys):
    assert main(["email-query", "a@"]) == 0
    assert capsys.readouterr().out == "Ann <a@x.com>\n"


def test_email_query_without_results_prints_nothing(indexed_env, capsys):
    assert main(["email-query", "nobody"]) == 0
    assert capsys.readouterr().out == ""


def test_add_creates_file_and_appends_to_index(indexed_env, capsys):
    vdir, index_path = indexed_env

    assert main(["add", "b@y.com", "Bob"]) == 0

    new_path = capsys.readouterr().out.strip()
    assert Path(new_path).parent == vdir
    assert Path(new_path).read_text(encoding="utf-8") == "b@y.com\nBob\n"
    assert [r.email for r in IndexStore(index_path).load()] == ["a@x.com", "b@y.com"]


def test_add_email_reads_message_from_stdin(indexed_env, monkeypatch, capsys):
    _, index_path = indexed_env
    monkeypatch.setattr("sys.stdin", io.StringIO("From: Carol <carol@z.org>\nSubject: hi\n\nbody\n"))

    assert main(["add-email"]) == 0

    new_path = capsys.readouterr().out.strip()
    assert Path(new_path).read_text(encoding="utf-8") == "carol@z.org\nCarol\n"
    assert IndexStore(index_path).load()[-1].path == new_path


def test_query_without_index_fails_cleanly(mates_env, capsys):
    assert main(["mutt-query", "ann"]) == 1
    assert capsys.readouterr().out == ""


def test_missing_configuration(monkeypatch, capsys):
    monkeypatch.delenv("MATES_DIR", raising=False)
    assert main(["index"]) == 1
    assert capsys.readouterr().out == ""


def test_edit_ambiguous_query(indexed_env, write_contact, monkeypatch):
    monkeypatch.setenv("EDITOR", "true")
    write_contact("anna.contact", "anna@x.com\nAnna\n")
    assert main(["index"]) == 0

    assert main(["edit", "ann"]) == 1


def test_edit_runs_editor(indexed_env, monkeypatch):
    monkeypatch.setenv("MATES_EDITOR", "true")
    assert main(["edit", "a@x.com"]) == 0


def test_subcommand_required(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


@pytest.mark.parametrize("email", ["", "  ", "a b@x"])
def test_add_rejects_bad_email_without_touching_index(indexed_env, capsys, email):
    vdir, index_path = indexed_env
    before = index_path.read_text(encoding="utf-8")

    assert main(["add", email, "Ghost"]) == 1

    assert capsys.readouterr().out == ""
    assert index_path.read_text(encoding="utf-8") == before
    assert [p.name for p in vdir.iterdir()] == ["ann.contact"]
    assert main(["email-query", "ann"]) == 0


def test_add_without_index_leaves_vdir_untouched(mates_env, capsys):
    vdir, _ = mates_env
    assert main(["add", "b@y.com", "Bob"]) == 1
    assert capsys.readouterr().out == ""
    assert list(vdir.iterdir()) == []


def test_add_email_without_index_leaves_vdir_untouched(mates_env, monkeypatch):
    vdir, _ = mates_env
    monkeypatch.setattr("sys.stdin", io.StringIO("From: Carol <carol@z.org>\n\nbody\n"))
    assert main(["add-email"]) == 1
    assert list(vdir.iterdir()) == []


def test_index_path_is_a_directory(mates_env, monkeypatch, tmp_path: Path, capsys):
    monkeypatch.setenv("MATES_INDEX", str(tmp_path))
    assert main(["mutt-query", "ann"]) == 1
    assert capsys.readouterr().out == ""
