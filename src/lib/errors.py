"""
Exception types raised by the statapp build pipeline

Every failure the pipeline can detect is unrecoverable at the point of
detection: the stage raises, the AppCompiler reports the stage as failed and
re-raises, and the CLI turns the exception into a non-zero exit.
"""

from enum import Enum
from typing import Optional


class ErrorType(Enum):
    """Severity tag printed in front of reported messages"""
    FATAL = "FATAL"
    WARNING = "WARNING"
    INFO = "INFO"


class StatAppError(Exception):
    """Base class of all statapp errors"""
    pass


class ProjectConfigError(StatAppError):
    """Raised when a project's statapp.yaml cannot be loaded or validated"""
    pass


class DirectiveError(StatAppError):
    """
    A directive in a page could not be scanned or parsed

    Attributes:
        reason: What is wrong with the directive
        directive: Raw directive text as found in the page
        source: Page file name, attached by the resolver that scanned it
    """

    def __init__(self, reason: str, directive: str, source: Optional[str] = None) -> None:
        self.reason = reason
        self.directive = directive
        self.source = source
        super().__init__(reason)

    def source_attach(self, source: str) -> None:
        """Record the page the directive was found in (first caller wins)"""
        if self.source is None:
            self.source = source

    def __str__(self) -> str:
        location = f" in '{self.source}'" if self.source else ""
        return f"Could not parse '{self.directive}'{location} because of: {self.reason}"


class DirectiveSyntaxError(DirectiveError):
    """Malformed directive text (missing parentheses, bad order literal)"""
    pass


class DirectiveArityError(DirectiveError):
    """Wrong argument count for a known directive kind"""
    pass


class UnknownDirectiveError(DirectiveError):
    """Directive name is not one of partial, script, style"""
    pass


class UnterminatedDirectiveError(DirectiveError):
    """Open marker without a matching close marker"""
    pass


class MissingResourceError(StatAppError):
    """
    A referenced partial, style or script is absent from its catalog

    Attributes:
        kind: Resource category ("partial", "style", "script")
        name: Referenced file name
        source: Page file name containing the reference
    """

    def __init__(self, kind: str, name: str, source: Optional[str] = None) -> None:
        self.kind = kind
        self.name = name
        self.source = source
        location = f" (referenced from '{source}')" if source else ""
        super().__init__(f"Could not find {kind} '{name}'{location}")


class IOFailure(StatAppError):
    """Filesystem read, write or listing failure"""
    pass


class CompressionError(IOFailure):
    """A text compressor failed on its input"""
    pass
