"""
Directive and directive span models

Defines the closed set of directive kinds of the statapp templating language
and the immutable structures produced by the parser and the tag scanner.

All directives are written inside markers in a page:

    <- partial(header.html) ->
    <- style(common.css) ->
    <- script(app.js, 10) ->
"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict, Tuple


class DirectiveKind(Enum):
    """
    Kinds of statapp directives

    The value is the directive name as written in the page.
    """
    PARTIAL = "partial"    # Inline a partial file, 1 argument (filename)
    SCRIPT = "script"      # Include a script, 2 arguments (filename, sort order)
    STYLE = "style"        # Include a stylesheet, 1 argument (filename)


# Required argument count per directive kind
DIRECTIVE_ARITY: Dict[DirectiveKind, int] = {
    DirectiveKind.PARTIAL: 1,
    DirectiveKind.SCRIPT: 2,
    DirectiveKind.STYLE: 1,
}


@dataclass(frozen=True)
class Directive:
    """
    A parsed directive

    Attributes:
        kind: Directive kind
        args: Whitespace-trimmed arguments in source order

    Example:
        "script(app.js, 3)" parses to
        Directive(kind=DirectiveKind.SCRIPT, args=("app.js", "3"))
    """
    kind: DirectiveKind
    args: Tuple[str, ...]

    @property
    def filename(self) -> str:
        """Referenced file name (first argument of every directive kind)"""
        return self.args[0]

    @property
    def order(self) -> int:
        """Sort order of a script directive"""
        if self.kind is not DirectiveKind.SCRIPT:
            raise AttributeError(f"'{self.kind.value}' directives carry no sort order")
        return int(self.args[1])


@dataclass(frozen=True)
class DirectiveSpan:
    """
    Location of a directive in a source document

    Attributes:
        start: Offset of the open marker
        end: Offset just past the close marker
        body: Trimmed text between the markers (e.g., "style(a.css)")
        directive: Parsed directive

    Example:
        For "<p>\\n<- style(a.css) ->" the span is
        DirectiveSpan(start=4, end=22, body="style(a.css)", directive=...)
    """
    start: int
    end: int
    body: str
    directive: Directive
