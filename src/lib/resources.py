"""
Shared machinery of the style and script stages

Both stages follow the same three steps over the pages in the temporary
directory:

1. Discovery: scan the stage's directives, check every referenced file
   exists in the resource catalog and collect a ResourceUsage (per-page
   reference sets, all referenced names, script sort orders).
2. Emission: resources referenced by every page are concatenated into one
   compressed global bundle, all others are compressed into standalone
   files under their own names.
3. Rewrite: the first directive naming a global resource in a page becomes
   a tag for the bundle, later ones are deleted; page-specific directives
   become their own tag.

Subclasses choose the directive kind, the directory settings, the tag
format, the bundle ordering and where rewritten pages go.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Set

from ..config.settings import AppSettings, appsettings
from ..models.directives import Directive, DirectiveKind, DirectiveSpan
from ..models.resources import ResourceCatalog, ResourceUsage
from .compressor import TextCompressor, compressors_make
from .errors import DirectiveError, MissingResourceError
from .files import catalog_build, directory_make, directory_open, files_list, text_read, text_write
from .log import LOG
from .scanner import document_substitute, spans_scan


class ResourceResolver(ABC):
    """
    Base class of the style (stage 2) and script (stage 3) resolvers

    Class attributes set by subclasses:
        kind: Directive kind handled by the stage
        label: Resource name used in messages ("style", "script")
        content_type: Compressor key for the resource files ("css", "js")
        stage: Stage number used in progress messages
    """

    kind: DirectiveKind
    label: str
    content_type: str
    stage: int

    def __init__(
        self,
        project_dir: Path,
        output_dir: Path,
        settings: AppSettings = appsettings,
        compressors: Optional[Mapping[str, TextCompressor]] = None,
    ) -> None:
        """
        Args:
            project_dir: Project root holding the resource directory
            output_dir: App output directory (holds the temporary directory)
            settings: Directory layout, markers and bundle names
            compressors: Compressor per content type (default: from settings)
        """
        self.settings = settings
        self.project_dir = Path(project_dir)
        self.output_dir = Path(output_dir)
        self.temp_dir = self.output_dir / settings.temp_dir
        self.compressors = compressors if compressors is not None else compressors_make(settings)

    # Subclass hooks

    @property
    @abstractmethod
    def resource_subdir(self) -> str:
        """Resource directory relative to the project and output roots"""
        ...

    @property
    @abstractmethod
    def global_name(self) -> str:
        """File name of the global bundle"""
        ...

    @property
    @abstractmethod
    def page_output_dir(self) -> Path:
        """Directory rewritten pages are written to"""
        ...

    @abstractmethod
    def tag_make(self, name: str) -> str:
        """Markup referencing a resource file of this stage"""
        ...

    def reference_record(self, usage: ResourceUsage, directive: Directive) -> None:
        """Record stage-specific data for a discovered directive"""
        pass

    def globalOrder_get(self, usage: ResourceUsage, globals_: Set[str]) -> List[str]:
        """Concatenation order of the global bundle"""
        return [name for name in usage.allReferenced if name in globals_]

    def page_finalize(self, page: str, text: str) -> str:
        """Last transformation applied to a rewritten page"""
        return text

    # Stage driver

    def run(self) -> Dict[str, Any]:
        """
        Run discovery, emission and rewrite over every page

        Output is computed in memory first; nothing is written unless every
        page was discovered and rewritten successfully.

        Returns:
            dict with 'pages' (names written), 'global' (bundled resources in
            bundle order) and 'standalone' (resources written on their own)

        Raises:
            DirectiveError: A page contains a malformed directive
            MissingResourceError: A page references an unknown resource
            IOFailure: Missing directory, read/write or compression failure
        """
        resource_dir = self.project_dir / self.resource_subdir
        directory_open(self.temp_dir, "Temporary")
        directory_open(resource_dir, f"{self.label.capitalize()}s")
        catalog = catalog_build(self.label, resource_dir)

        pages = {page.name: text_read(page) for page in files_list(self.temp_dir)}

        usage = self.usage_discover(pages, catalog)
        globals_ = usage.globals_compute()
        for name in sorted(globals_):
            LOG(f"Found global {self.label}: {name}", level=2)

        documents = self.documents_build(usage, globals_, catalog)

        rewritten: Dict[str, str] = {}
        for page, text in pages.items():
            LOG(f"Resolving {self.label}s (stage {self.stage}b - {self.label} resolving): {page}", level=1)
            rewritten[page] = self.page_finalize(page, self.page_rewrite(page, text, globals_))

        target_dir = directory_make(self.output_dir / self.resource_subdir)
        for name, content in documents.items():
            text_write(target_dir / name, content)
        for page, content in rewritten.items():
            text_write(self.page_output_dir / page, content)

        LOG(f"All {self.label}s are compiled", level=2)
        return {
            'pages': list(rewritten),
            'global': self.globalOrder_get(usage, globals_),
            'standalone': [name for name in usage.allReferenced if name not in globals_],
        }

    def usage_discover(self, pages: Dict[str, str], catalog: ResourceCatalog) -> ResourceUsage:
        """
        Discovery pass: collect the references of every page

        Raises:
            MissingResourceError: A referenced file is not in the catalog
        """
        usage = ResourceUsage()
        for page, text in pages.items():
            LOG(f"Parsing {self.label}s (stage {self.stage}a - {self.label} lookup): {page}", level=2)
            usage.page_add(page)
            try:
                for span in spans_scan(text, self.settings):
                    directive = span.directive
                    if directive.kind is not self.kind:
                        continue
                    if directive.filename not in catalog:
                        raise MissingResourceError(self.label, directive.filename, page)
                    usage.reference_add(page, directive.filename)
                    self.reference_record(usage, directive)
            except DirectiveError as e:
                e.source_attach(page)
                raise
        return usage

    def documents_build(
        self, usage: ResourceUsage, globals_: Set[str], catalog: ResourceCatalog
    ) -> Dict[str, str]:
        """
        Emission: compressed global bundle plus one compressed file per
        page-specific resource

        Returns:
            Output file name → compressed content
        """
        compressor = self.compressors[self.content_type]
        documents: Dict[str, str] = {}

        bundle = []
        for name in self.globalOrder_get(usage, globals_):
            LOG(f"Adding {self.label} '{name}' to {self.global_name}", level=3)
            bundle.append(text_read(catalog.files[name]))

        for name in usage.allReferenced:
            if name in globals_:
                continue
            LOG(f"Compressing {self.label} {name}", level=2)
            documents[name] = compressor.compress(text_read(catalog.files[name]))

        LOG(f"Compressing {self.label} {self.global_name}", level=2)
        documents[self.global_name] = compressor.compress(''.join(bundle))
        return documents

    def page_rewrite(self, page: str, text: str, globals_: Set[str]) -> str:
        """Rewrite pass: replace the stage's directives of one page with tags"""
        global_imported = False

        def resource_substitute(span: DirectiveSpan) -> Optional[str]:
            nonlocal global_imported
            directive = span.directive
            if directive.kind is not self.kind:
                return None
            if directive.filename not in globals_:
                return self.tag_make(directive.filename)
            if global_imported:
                return ""
            global_imported = True
            return self.tag_make(self.global_name)

        try:
            return document_substitute(text, resource_substitute, self.settings)
        except DirectiveError as e:
            e.source_attach(page)
            raise
