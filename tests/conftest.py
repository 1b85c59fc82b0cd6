from __future__ import annotations

from pathlib import Path

import pytest

from mates.models import ContactRecord


@pytest.fixture
def vdir(tmp_path: Path) -> Path:
    d = tmp_path / "contacts"
    d.mkdir()
    return d


@pytest.fixture
def index_path(tmp_path: Path) -> Path:
    return tmp_path / "mates_index"


@pytest.fixture
def sample_index() -> list[ContactRecord]:
    return [
        ContactRecord(path="/c/1", email="a@x.com", fullname="Ann"),
        ContactRecord(path="/c/2", email="b@y.com", fullname="Bob"),
    ]


@pytest.fixture
def mates_env(monkeypatch, vdir: Path, index_path: Path):
    """Point the CLI at a temporary vdir and index."""
    monkeypatch.setenv("MATES_DIR", str(vdir))
    monkeypatch.setenv("MATES_INDEX", str(index_path))
    monkeypatch.delenv("MATES_EDITOR", raising=False)
    monkeypatch.delenv("EDITOR", raising=False)
    return vdir, index_path


@pytest.fixture
def write_contact(vdir: Path):
    """Create a contact file in the temporary vdir."""

    def _write(name: str, text: str) -> Path:
        p = vdir / name
        p.write_text(text, encoding="utf-8")
        return p

    return _write
