"""Shared test fixtures."""

import os
from pathlib import Path

import pytest


@pytest.fixture
def tmp_vault(tmp_path: Path) -> Path:
    """Create a temporary vault directory with sample notes."""
    vault = tmp_path / "vault"
    vault.mkdir()

    # Create some sample notes
    (vault / "Note1.md").write_text("# Note 1\n\nThis is note 1 content.\n\n#tag1 #tag2")
    (vault / "note0.markdown").write_text("Lowercase note with a meeting agenda\n")
    (vault / "image.png").write_bytes(b"\x89PNG\r\n")
    (vault / "README").write_text("no extension")

    # Create a subfolder
    inbox = vault / "Inbox"
    inbox.mkdir()
    (inbox / "Task.md").write_text("- [ ] Buy groceries\n- [x] Done task\n")

    # Empty folder
    (vault / "Daily Notes").mkdir()

    # Hidden folders
    git = vault / ".git"
    git.mkdir()
    (git / "notes.md").write_text("hidden meeting notes")
    meta = vault / ".graphnotes"
    meta.mkdir()
    (meta / "events.jsonl").write_text("")
    (meta / "readme.md").write_text("metadata meeting")
    (vault / ".DS_Store").write_bytes(b"\x00\x01")

    return vault


@pytest.fixture
def unreadable_dir(monkeypatch):
    """Make os.scandir fail with PermissionError for the given directories."""
    real_scandir = os.scandir
    blocked: set[str] = set()

    def fake_scandir(path="."):
        if os.path.abspath(os.fspath(path)) in blocked:
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)

    def block(path: Path) -> Path:
        blocked.add(os.path.abspath(path))
        return path

    return block
