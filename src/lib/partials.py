"""
Stage 1: partial inlining

Replaces every partial directive of every page with the raw contents of the
referenced partial file and writes the result, under the page's own file
name, into the temporary directory that stages 2 and 3 read from.

Partial contents are inserted verbatim: directives inside a partial are not
expanded here (style and script directives they contain are picked up by the
later stages).
"""

from pathlib import Path
from typing import Dict, List, Optional

from ..config.settings import AppSettings, appsettings
from ..models.directives import DirectiveKind, DirectiveSpan
from ..models.resources import ResourceCatalog
from .errors import DirectiveError, MissingResourceError
from .files import (
    catalog_build,
    directory_make,
    directory_open,
    directory_remove,
    files_list,
    text_read,
    text_write,
)
from .log import LOG
from .scanner import document_substitute


class PartialResolver:
    """
    Inlines partials into pages (stage 1)

    Reads:  <project>/<pages_dir>/*, <project>/<partials_dir>/*
    Writes: <output>/<temp_dir>/<page>
    """

    def __init__(
        self,
        project_dir: Path,
        output_dir: Path,
        settings: AppSettings = appsettings,
    ) -> None:
        """
        Args:
            project_dir: Project root
            output_dir: App output directory (holds the temporary directory)
            settings: Directory layout and directive markers
        """
        self.settings = settings
        self.pages_dir = Path(project_dir) / settings.pages_dir
        self.partials_dir = Path(project_dir) / settings.partials_dir
        self.temp_dir = Path(output_dir) / settings.temp_dir
        self._contents: Dict[str, str] = {}

    def run(self) -> List[str]:
        """
        Resolve the partials of every page

        All pages are resolved in memory before any of them is written, so
        a failing page leaves the temporary directory untouched.

        Returns:
            Names of the pages written

        Raises:
            DirectiveError: A page contains a malformed directive
            MissingResourceError: A page references an unknown partial
            IOFailure: A directory is missing or a file cannot be read/written
        """
        directory_open(self.pages_dir, "Pages")
        directory_open(self.partials_dir, "Partials")
        catalog = catalog_build("partial", self.partials_dir)
        self._contents = {}

        resolved: Dict[str, str] = {}
        for page in files_list(self.pages_dir):
            LOG(f"Parsing HTML page file (stage 1 - partials): {page.name}", level=1)
            resolved[page.name] = self.page_resolve(page.name, text_read(page), catalog)

        # Drop pages left by an earlier failed or debug build
        if self.temp_dir.exists():
            LOG(f"Clearing stale temporary directory {self.temp_dir}", level=2)
            directory_remove(self.temp_dir)
        directory_make(self.temp_dir)
        for name, content in resolved.items():
            text_write(self.temp_dir / name, content)

        LOG("All partials are compiled", level=2)
        return list(resolved)

    def page_resolve(self, page: str, text: str, catalog: ResourceCatalog) -> str:
        """Return the page text with every partial directive substituted"""

        def partial_substitute(span: DirectiveSpan) -> Optional[str]:
            directive = span.directive
            if directive.kind is not DirectiveKind.PARTIAL:
                return None
            return self.partial_read(directive.filename, page, catalog)

        try:
            return document_substitute(text, partial_substitute, self.settings)
        except DirectiveError as e:
            e.source_attach(page)
            raise

    def partial_read(self, name: str, page: str, catalog: ResourceCatalog) -> str:
        """Contents of a partial, read once per run"""
        if name not in self._contents:
            path = catalog.path_get(name)
            if path is None:
                raise MissingResourceError("partial", name, page)
            self._contents[name] = text_read(path)
        return self._contents[name]
