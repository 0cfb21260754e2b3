"""Tests for path admission rules."""

from graphnotes.indexer.filters import (
    METADATA_DIR_NAME,
    admit,
    admit_content,
    extension,
    is_markdown,
)


class TestAdmit:
    """Tests for the navigation filter."""

    def test_metadata_dir_admitted(self):
        assert METADATA_DIR_NAME == ".graphnotes"
        assert admit(".graphnotes") is True

    def test_hidden_names_rejected(self):
        for name in (".git", ".DS_Store", ".obsidian", ".", "..", ".graphnotes2"):
            assert admit(name) is False, name

    def test_regular_names_admitted(self):
        for name in ("Inbox", "note.md", "a.graphnotes", "image.png"):
            assert admit(name) is True, name

    def test_content_filter_has_no_exception(self):
        assert admit_content(".graphnotes") is False
        assert admit_content(".git") is False
        assert admit_content("Inbox") is True


class TestMarkdownExtension:
    """Tests for the markdown allow-list."""

    def test_extension(self):
        assert extension("note.md") == "md"
        assert extension("archive.tar.gz") == "gz"
        assert extension("README") == ""
        assert extension(".profile") == ""
        assert extension("trailing.") == ""

    def test_is_markdown(self):
        assert is_markdown("note.md")
        assert is_markdown("note.markdown")
        assert is_markdown(".hidden.md")
        assert not is_markdown("note.txt")
        assert not is_markdown("md")
        assert not is_markdown(".md")

    def test_extension_is_case_sensitive(self):
        assert not is_markdown("NOTE.MD")
