"""
Text compressors for markup, stylesheets and scripts

Each compressor exposes compress(text) -> str and raises CompressionError
when the underlying library fails.

    HtmlCompressor        htmlmin (htmlmin2 distribution)
    CssCompressor         csscompressor
    JavascriptCompressor  rjsmin
    PassthroughCompressor returns text unchanged
"""

from typing import Any, Callable, Dict, Protocol

import csscompressor
import htmlmin
import rjsmin

from ..config.settings import AppSettings, appsettings
from .errors import CompressionError


class TextCompressor(Protocol):
    """Capability to shorten text without changing its meaning"""

    def compress(self, text: str) -> str:
        ...


class _LibraryCompressor:
    """Wraps a minifier function and converts its failures to CompressionError"""

    content_type = "text"

    def minify(self, text: str) -> str:
        raise NotImplementedError

    def compress(self, text: str) -> str:
        try:
            return self.minify(text)
        except Exception as e:
            raise CompressionError(f"Could not compress {self.content_type}: {e}") from e


class HtmlCompressor(_LibraryCompressor):
    """Compress HTML documents with htmlmin"""

    content_type = "HTML"

    # Attribute quotes are kept so rewritten link and script tags stay verbatim
    options: Dict[str, Any] = {
        "remove_comments": True,
        "remove_empty_space": True,
        "remove_all_empty_space": False,
        "reduce_empty_attributes": True,
        "reduce_boolean_attributes": False,
        "remove_optional_attribute_quotes": False,
        "convert_charrefs": True,
        "keep_pre": False,
    }

    def minify(self, text: str) -> str:
        return htmlmin.minify(text, **self.options)


class CssCompressor(_LibraryCompressor):
    """Compress stylesheets with csscompressor"""

    content_type = "CSS"

    def minify(self, text: str) -> str:
        return csscompressor.compress(text)


class JavascriptCompressor(_LibraryCompressor):
    """Compress scripts with rjsmin"""

    content_type = "Javascript"

    def minify(self, text: str) -> str:
        return rjsmin.jsmin(text)


class PassthroughCompressor:
    """Identity compressor used when output minification is disabled"""

    def compress(self, text: str) -> str:
        return text


COMPRESSOR_FACTORIES: Dict[str, Callable[[], TextCompressor]] = {
    "html": HtmlCompressor,
    "css": CssCompressor,
    "js": JavascriptCompressor,
}


def compressors_make(settings: AppSettings = appsettings) -> Dict[str, TextCompressor]:
    """
    Build the compressor for every content type

    Returns:
        {"html": ..., "css": ..., "js": ...}; all passthrough when
        settings.minify_output is false
    """
    if not settings.minify_output:
        return {content_type: PassthroughCompressor() for content_type in COMPRESSOR_FACTORIES}
    return {content_type: factory() for content_type, factory in COMPRESSOR_FACTORIES.items()}
