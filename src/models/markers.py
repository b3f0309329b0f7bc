"""
Marker vocabulary of the continuum dump format

Defines the marker kinds a dump line can be classified as, and the fixed
keywords that open and close sections and byte-code blocks.
"""

from enum import Enum
from typing import Set


class MarkerKind(Enum):
    """
    Classification of a single dump line

    A line's kind depends only on its text; it carries no scanning state.
    """
    SECTION_START = "section_start"    # BeginController : Name
    SECTION_END = "section_end"        # EndController
    BYTECODE_START = "bytecode_start"  # ByteCode
    BYTECODE_END = "bytecode_end"      # EndByteCode
    PLAIN = "plain"


# Keys that open a section when written as "Key : Value"
SECTION_STARTS: Set[str] = {
    'BeginController',
    'InfinetCtlr',
    'Object',
}

# Whole-line keywords that close a section
SECTION_ENDS: Set[str] = {
    'EndController',
    'EndInfinetCtlr',
    'EndObject',
}

BYTECODE_START: str = 'ByteCode'
BYTECODE_END: str = 'EndByteCode'
