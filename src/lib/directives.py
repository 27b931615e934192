"""
Directive parser for the statapp templating language

Parses the body of a single directive, the text found between the markers,
into a typed Directive:

    partial(header.html)   → Directive(PARTIAL, ("header.html",))
    style( common.css )    → Directive(STYLE, ("common.css",))
    script(app.js, 10)     → Directive(SCRIPT, ("app.js", "10"))
"""

import re

from ..models.directives import Directive, DirectiveKind, DIRECTIVE_ARITY
from .errors import DirectiveArityError, DirectiveSyntaxError, UnknownDirectiveError

# Base-10 integer literal accepted as a script sort order
ORDER_PATTERN = re.compile(r'[+-]?\d+')

_KINDS_BY_NAME = {kind.value: kind for kind in DirectiveKind}


def args_split(text: str, open_par: int, close_par: int) -> tuple:
    """Split the text between the parentheses on ',' and trim every piece"""
    return tuple(arg.strip() for arg in text[open_par:close_par].split(','))


def directive_parse(text: str) -> Directive:
    """
    Parse a trimmed directive body into a Directive

    The name is everything before the first '('; the arguments are the
    comma-separated pieces between that '(' and the first ')' after it.
    Text after the closing parenthesis is ignored.

    Args:
        text: Directive body, e.g. "script(app.js, 3)"

    Returns:
        Parsed, immutable Directive

    Raises:
        DirectiveSyntaxError: Missing '(' or ')', or a non-integer script order
        DirectiveArityError: Wrong argument count for the directive kind
        UnknownDirectiveError: Name is not partial, script or style

    Example:
        >>> directive_parse("partial(a)")
        Directive(kind=<DirectiveKind.PARTIAL: 'partial'>, args=('a',))
    """
    open_par = text.find('(')
    if open_par == -1:
        raise DirectiveSyntaxError("Could not find opening parentheses", text)

    close_par = text.find(')', open_par)
    if close_par == -1:
        raise DirectiveSyntaxError("Could not find closing parentheses", text)

    name = text[:open_par]
    args = args_split(text, open_par + 1, close_par)

    kind = _KINDS_BY_NAME.get(name)
    if kind is None:
        raise UnknownDirectiveError(f"Unknown directive '{name}'", text)

    expected = DIRECTIVE_ARITY[kind]
    if len(args) != expected:
        raise DirectiveArityError(
            f"Argument count mismatch for {name} directive, expected {expected} got {len(args)}",
            text,
        )

    if kind is DirectiveKind.SCRIPT and not ORDER_PATTERN.fullmatch(args[1]):
        raise DirectiveSyntaxError(
            f"Script sort order '{args[1]}' is not an integer", text
        )

    return Directive(kind=kind, args=args)
