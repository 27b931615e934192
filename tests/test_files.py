"""
Filesystem helper tests
"""

import os
import stat

import pytest

from statapp.lib.errors import IOFailure
from statapp.lib.files import (
    assets_mirror,
    catalog_build,
    directory_open,
    files_list,
    text_read,
    text_write,
)


class TestListing:
    """Test directory listing and catalogs"""

    def test_files_only_sorted(self, tmp_path):
        (tmp_path / "b.css").write_text("B")
        (tmp_path / "a.css").write_text("A")
        (tmp_path / "nested").mkdir()
        (tmp_path / "nested" / "c.css").write_text("C")

        assert [p.name for p in files_list(tmp_path)] == ["a.css", "b.css"]

    def test_catalog(self, tmp_path):
        (tmp_path / "x.js").write_text("X")
        catalog = catalog_build("script", tmp_path)

        assert "x.js" in catalog
        assert "y.js" not in catalog
        assert len(catalog) == 1
        assert catalog.path_get("x.js") == tmp_path / "x.js"
        assert catalog.path_get("X.JS") is None

    def test_directory_open_missing(self, tmp_path):
        with pytest.raises(IOFailure, match="Partials"):
            directory_open(tmp_path / "partials", "Partials")


class TestTextFiles:
    """Test reading and atomic writing"""

    def test_write_then_read(self, tmp_path):
        target = tmp_path / "page.html"
        text_write(target, "<p>héllo</p>")
        assert text_read(target) == "<p>héllo</p>"

    def test_write_replaces_without_leftovers(self, tmp_path):
        target = tmp_path / "page.html"
        target.write_text("old")
        text_write(target, "new")

        assert target.read_text() == "new"
        assert [p.name for p in tmp_path.iterdir()] == ["page.html"]

    def test_write_into_missing_directory(self, tmp_path):
        with pytest.raises(IOFailure):
            text_write(tmp_path / "missing" / "page.html", "x")

    def test_read_missing(self, tmp_path):
        with pytest.raises(IOFailure, match="nothing.html"):
            text_read(tmp_path / "nothing.html")


class TestAssetsMirror:
    """Test recursive copy that leaves existing files alone"""

    def test_tree_copied(self, tmp_path):
        source = tmp_path / "src"
        (source / "icons").mkdir(parents=True)
        (source / "logo.png").write_bytes(b"PNG")
        (source / "icons" / "a.svg").write_text("<svg/>")
        target = tmp_path / "out" / "images"

        assert assets_mirror(source, target) == 2
        assert (target / "logo.png").read_bytes() == b"PNG"
        assert (target / "icons" / "a.svg").read_text() == "<svg/>"

    def test_existing_files_skipped(self, tmp_path):
        source = tmp_path / "src"
        source.mkdir()
        (source / "a.txt").write_text("new")
        (source / "b.txt").write_text("B")
        target = tmp_path / "out"
        target.mkdir()
        (target / "a.txt").write_text("old")

        assert assets_mirror(source, target) == 1
        assert (target / "a.txt").read_text() == "old"
        assert (target / "b.txt").read_text() == "B"


class TestFileModes:
    """Test permissions of written files"""

    def test_new_file_follows_umask(self, tmp_path):
        target = tmp_path / "page.html"
        old_umask = os.umask(0o027)
        try:
            text_write(target, "x")
        finally:
            os.umask(old_umask)
        assert stat.S_IMODE(target.stat().st_mode) == 0o640

    def test_existing_mode_kept(self, tmp_path):
        target = tmp_path / "page.html"
        target.write_text("old")
        target.chmod(0o604)

        text_write(target, "new")

        assert stat.S_IMODE(target.stat().st_mode) == 0o604
