"""
Models package for dmpextract

Contains data structures and type definitions for the extraction pipeline.
"""

from .state import ProgramState, pipeline
from .markers import MarkerKind, SECTION_STARTS, SECTION_ENDS, BYTECODE_START, BYTECODE_END
from .scanner import (
    TrackerState,
    TaggedLine,
    ObjectGroup,
    OutputRecord,
    BlankState,
    ExtractResult,
    path_render,
)

__all__ = [
    "ProgramState",
    "pipeline",
    "MarkerKind",
    "SECTION_STARTS",
    "SECTION_ENDS",
    "BYTECODE_START",
    "BYTECODE_END",
    "TrackerState",
    "TaggedLine",
    "ObjectGroup",
    "OutputRecord",
    "BlankState",
    "ExtractResult",
    "path_render",
]
