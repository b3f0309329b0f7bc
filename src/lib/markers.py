"""
Marker recognition for continuum dump lines

Pure functions classifying a line's text. Recognition is lenient: anything
that does not match a marker exactly is plain content, never an error.

Example:
    >>> line_classify("  Object : ReadCompressors")
    <MarkerKind.SECTION_START: 'section_start'>
    >>> start_parse("  Object : ReadCompressors")
    'ReadCompressors'
"""

from typing import Optional

from ..models.markers import (
    MarkerKind,
    SECTION_STARTS,
    SECTION_ENDS,
    BYTECODE_START,
    BYTECODE_END,
)


def start_parse(line: str) -> Optional[str]:
    """
    Read the section value from a "Key : Value" start marker

    The line must contain exactly one colon and its trimmed key must be a
    recognized section start keyword.

    Args:
        line: Raw dump line

    Returns:
        The trimmed value (possibly empty), or None if the line is not a
        section start
    """
    parts = line.split(':')
    if len(parts) != 2:
        return None
    key, value = parts
    if key.strip() not in SECTION_STARTS:
        return None
    return value.strip()


def start_is(line: str) -> bool:
    return start_parse(line) is not None


def end_is(line: str) -> bool:
    """Whole trimmed line is a section end keyword"""
    return line.strip() in SECTION_ENDS


def byteCodeStart_is(line: str) -> bool:
    return BYTECODE_START in line and BYTECODE_END not in line


def byteCodeEnd_is(line: str) -> bool:
    return BYTECODE_END in line


def line_classify(line: str) -> MarkerKind:
    """
    Classify a dump line by its text alone

    Args:
        line: Raw dump line

    Returns:
        The MarkerKind of the line. Section markers take precedence over
        byte-code markers; everything unrecognized is PLAIN.
    """
    if start_is(line):
        return MarkerKind.SECTION_START
    if end_is(line):
        return MarkerKind.SECTION_END
    if byteCodeEnd_is(line):
        return MarkerKind.BYTECODE_END
    if byteCodeStart_is(line):
        return MarkerKind.BYTECODE_START
    return MarkerKind.PLAIN
