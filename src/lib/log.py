"""
Centralized logging using Loguru with context-aware verbosity.

The LOG() function honours the verbosity of the ProgramState bound to the
current context, so the scanning modules can log without being handed
the state.

Usage:
    from dmpextract.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)

    LOG("Wrote 12 objects", level=1)
    LOG("Group BeginController/AHU1 has 340 lines", level=2)
    LOG("Skipping group without byte-code", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <7}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Bind a ProgramState to the logging context.

    Args:
        state: ProgramState instance with a verbosity attribute
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=trace)
        **kwargs: Additional loguru arguments
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.debug(message, **kwargs)


def WARN(message: str, **kwargs: Any) -> None:
    """Log a warning regardless of verbosity."""
    logger.warning(message, **kwargs)
