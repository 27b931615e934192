"""
Shared fixtures for statapp tests

Builds throwaway project trees:

    <tmp>/project/html/*         pages
    <tmp>/project/partials/*     partials
    <tmp>/project/dist/css/*     styles
    <tmp>/project/dist/js/*      scripts
    <tmp>/app/                   output
"""

from pathlib import Path
from typing import Callable, Dict, Optional

import pytest

from statapp.config.settings import AppSettings


class MarkingCompressor:
    """Test compressor that prefixes its input with a tag"""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        self.calls = 0

    def compress(self, text: str) -> str:
        self.calls += 1
        return f"[{self.tag}]{text}"


def files_write(directory: Path, files: Optional[Dict[str, str]]) -> None:
    """Create directory and write every name → content pair into it"""
    directory.mkdir(parents=True, exist_ok=True)
    for name, content in (files or {}).items():
        (directory / name).write_text(content, encoding='utf-8')


@pytest.fixture
def settings() -> AppSettings:
    """Default settings, independent of the caller's environment"""
    return AppSettings(_env_file=None)


@pytest.fixture
def compressors() -> Dict[str, MarkingCompressor]:
    """Marking compressors for every content type"""
    return {
        "html": MarkingCompressor("html"),
        "css": MarkingCompressor("css"),
        "js": MarkingCompressor("js"),
    }


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "app"


@pytest.fixture
def project_make(tmp_path: Path, settings: AppSettings) -> Callable[..., Path]:
    """
    Factory building a project tree

    Example:
        project = project_make(pages={"a.html": "..."}, styles={"a.css": "..."})
    """

    def make(
        pages: Optional[Dict[str, str]] = None,
        partials: Optional[Dict[str, str]] = None,
        styles: Optional[Dict[str, str]] = None,
        scripts: Optional[Dict[str, str]] = None,
    ) -> Path:
        project = tmp_path / "project"
        files_write(project / settings.pages_dir, pages)
        files_write(project / settings.partials_dir, partials)
        files_write(project / settings.styles_dir, styles)
        files_write(project / settings.scripts_dir, scripts)
        return project

    return make


@pytest.fixture
def temp_pages_write(output_dir: Path, settings: AppSettings) -> Callable[[Dict[str, str]], Path]:
    """Write pages straight into the temporary directory (stage 1 output)"""

    def write(pages: Dict[str, str]) -> Path:
        temp_dir = output_dir / settings.temp_dir
        files_write(temp_dir, pages)
        return temp_dir

    return write
