"""
Models package for statapp

Contains data structures and type definitions for the build pipeline.
"""

from .state import ProgramState, pipeline
from .directives import Directive, DirectiveKind, DirectiveSpan, DIRECTIVE_ARITY
from .resources import ResourceCatalog, ResourceUsage

__all__ = [
    "ProgramState",
    "pipeline",
    "Directive",
    "DirectiveKind",
    "DirectiveSpan",
    "DIRECTIVE_ARITY",
    "ResourceCatalog",
    "ResourceUsage",
]
