"""
Stage 2: style consolidation

Stylesheets referenced by every page are merged into the global stylesheet
(concatenated in first-reference order, compressed once); every other
referenced stylesheet is compressed on its own. Style directives become
<link rel="stylesheet"> tags and the rewritten pages replace their copies in
the temporary directory for stage 3.
"""

from pathlib import Path

from ..models.directives import DirectiveKind
from .resources import ResourceResolver


class StyleResolver(ResourceResolver):
    """Consolidates style directives (stage 2)"""

    kind = DirectiveKind.STYLE
    label = "style"
    content_type = "css"
    stage = 2

    @property
    def resource_subdir(self) -> str:
        return self.settings.styles_dir

    @property
    def global_name(self) -> str:
        return self.settings.global_style_name

    @property
    def page_output_dir(self) -> Path:
        return self.temp_dir

    def tag_make(self, name: str) -> str:
        return self.settings.linkTag_make(name)
