"""
Tag scanner for directive markers

Locates "<- ... ->" directive spans in raw page text with a plain substring
scan and rewrites documents span by span.

Substitution keeps every character outside the spans except one: the
character immediately preceding an open marker is dropped along with the
directive (directives are expected to sit on their own line or after a
separating space). At the start of the document, or directly after a
previous span, there is nothing to drop.

Example:
    >>> text = "<head>\\n<- style(a.css) ->\\n</head>"
    >>> [span.body for span in spans_scan(text)]
    ['style(a.css)']
    >>> document_substitute(text, lambda span: "<link>")
    '<head><link>\\n</head>'
"""

from typing import Callable, Iterator, Optional

from ..models.directives import DirectiveSpan
from ..config.settings import AppSettings, appsettings
from .directives import directive_parse
from .errors import UnterminatedDirectiveError

# Returns replacement text for a span, or None to leave the span untouched
SpanReplacer = Callable[[DirectiveSpan], Optional[str]]


def spans_scan(text: str, settings: AppSettings = appsettings) -> Iterator[DirectiveSpan]:
    """
    Lazily yield every directive span of a document in document order

    Each call starts a fresh scan from the beginning of the text. Parse
    errors surface when the offending span is reached.

    Args:
        text: Raw document text
        settings: Provides the open and close markers

    Yields:
        DirectiveSpan for each marker pair

    Raises:
        UnterminatedDirectiveError: Open marker with no close marker after it
        DirectiveError: Directive body fails to parse
    """
    open_marker = settings.open_marker
    close_marker = settings.close_marker

    cursor = 0
    while True:
        start = text.find(open_marker, cursor)
        if start == -1:
            return

        body_start = start + len(open_marker)
        close = text.find(close_marker, body_start)
        if close == -1:
            raise UnterminatedDirectiveError(
                "Could not find matching closing tag", text[start:start + 80]
            )

        body = text[body_start:close].strip()
        end = close + len(close_marker)
        yield DirectiveSpan(start=start, end=end, body=body, directive=directive_parse(body))
        cursor = end


def document_substitute(
    text: str, replacer: SpanReplacer, settings: AppSettings = appsettings
) -> str:
    """
    Rewrite a document by replacing directive spans

    Args:
        text: Raw document text
        replacer: Called for every span; its return value replaces the span
                  (and the character preceding it), "" deletes the span,
                  None leaves the span and its preceding character in place
        settings: Provides the open and close markers

    Returns:
        Rewritten document; text without directives is returned unchanged
    """
    parts = []
    cursor = 0
    for span in spans_scan(text, settings):
        replacement = replacer(span)
        if replacement is None:
            continue
        parts.append(text[cursor:max(cursor, span.start - 1)])
        parts.append(replacement)
        cursor = span.end
    parts.append(text[cursor:])
    return ''.join(parts)
