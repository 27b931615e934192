"""
Stage 3: script consolidation

Works like the style stage, with one addition: every script directive
carries an integer sort order. The lowest order requested for a script by
any page becomes its position in the global script, so the bundle is
concatenated in ascending order (ties keep the order in which scripts were
first requested).

This is the last stage: rewritten pages are compressed as HTML and written
to the root of the output directory.
"""

from pathlib import Path
from typing import List, Set

from ..models.directives import Directive, DirectiveKind
from ..models.resources import ResourceUsage
from .log import LOG
from .resources import ResourceResolver


class ScriptResolver(ResourceResolver):
    """Consolidates and orders script directives (stage 3)"""

    kind = DirectiveKind.SCRIPT
    label = "script"
    content_type = "js"
    stage = 3

    @property
    def resource_subdir(self) -> str:
        return self.settings.scripts_dir

    @property
    def global_name(self) -> str:
        return self.settings.global_script_name

    @property
    def page_output_dir(self) -> Path:
        return self.output_dir

    def tag_make(self, name: str) -> str:
        return self.settings.scriptTag_make(name)

    def reference_record(self, usage: ResourceUsage, directive: Directive) -> None:
        usage.order_add(directive.filename, directive.order)

    def globalOrder_get(self, usage: ResourceUsage, globals_: Set[str]) -> List[str]:
        """Global scripts ascending by their lowest requested sort order"""
        return [name for name in usage.orderSorted_get() if name in globals_]

    def page_finalize(self, page: str, text: str) -> str:
        LOG(f"Compressing HTML {page}", level=2)
        return self.compressors["html"].compress(text)
