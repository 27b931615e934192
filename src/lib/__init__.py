"""
statapp - Static app compiler

Inlines partials into HTML pages and consolidates their styles and scripts
into a compressed, deduplicated bundle.
"""

__version__ = "1.0.0"

from .compiler import AppCompiler
from .generator import AppGenerator
from .directives import directive_parse
from .scanner import spans_scan, document_substitute
from .log import LOG, ERROR, state_connectToLogger

__all__ = [
    "AppCompiler",
    "AppGenerator",
    "directive_parse",
    "spans_scan",
    "document_substitute",
    "LOG",
    "ERROR",
    "state_connectToLogger",
    "__version__",
]
