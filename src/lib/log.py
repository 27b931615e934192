"""
Centralized logging using Loguru with context-aware verbosity.

This module provides a LOG() function that respects the current ProgramState's
verbosity level without requiring explicit state passing, and an ERROR()
function for tagged fatal/warning messages that are always emitted.

Usage:
    from lib.log import LOG, ERROR, state_connectToLogger

    # At start of pipeline function:
    state_connectToLogger(state)

    # Anywhere in that context:
    LOG("This message appears if verbosity >= 1", level=1)
    LOG("Debug details appear if verbosity >= 2", level=2)
    ERROR("Could not copy fonts", ErrorType.WARNING)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

from .errors import ErrorType

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

# Configure loguru with statapp-specific format
logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Call this at the start of the pipeline to make the state's verbosity
    setting available to LOG() calls throughout that context.

    Args:
        state: ProgramState instance with verbosity attribute
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Additional loguru metadata

    Verbosity levels:
        1 = Normal output (default)
        2 = Verbose (-v)
        3 = Debug (-vv or higher)
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1).debug(message, **kwargs)


def ERROR(message: str, errortype: ErrorType = ErrorType.FATAL) -> None:
    """
    Report a tagged error message regardless of verbosity.

    Args:
        message: Human-readable description (offending file, directive text)
        errortype: Severity tag; FATAL maps to loguru error, WARNING to warning

    Example:
        ERROR("Could not find partial 'nav.html'")
        → "[FATAL] Could not find partial 'nav.html'"
    """
    tagged = f"[{errortype.value}] {message}"
    if errortype is ErrorType.FATAL:
        logger.opt(depth=1).error(tagged)
    elif errortype is ErrorType.WARNING:
        logger.opt(depth=1).warning(tagged)
    else:
        logger.opt(depth=1).info(tagged)
