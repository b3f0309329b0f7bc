"""
Byte-code block extraction and blank-run repair

Two generators applied to each object group in turn:

1. byteCode_extract: the lines strictly between the first ByteCode marker
   and the next EndByteCode marker
2. blankRuns_dedupe: halves every run of blank lines, repairing dumps that
   write each intended blank line twice

Example:
    >>> block = byteCode_extract(["Object : B", "ByteCode", "X", "", "", "Y", "EndByteCode"])
    >>> list(blankRuns_dedupe(block))
    ['X', '', 'Y']
"""

from itertools import dropwhile, islice, takewhile
from typing import Iterable, Iterator

from ..models.scanner import BlankState
from .markers import byteCodeStart_is, byteCodeEnd_is


def byteCode_extract(lines: Iterable[str]) -> Iterator[str]:
    """
    Isolate the byte-code block of one object's lines

    Args:
        lines: The object's lines in order

    Returns:
        Iterator over the lines after the first ByteCode marker, stopping
        before the first following EndByteCode. Empty when there is no
        ByteCode marker; runs to the end of ``lines`` when the block is
        never closed.
    """
    started = dropwhile(lambda line: not byteCodeStart_is(line), lines)
    body = islice(started, 1, None)
    return takewhile(lambda line: not byteCodeEnd_is(line), body)


def blankState_advance(state: BlankState, line: str) -> BlankState:
    """
    Step the blank-run state machine by one line

    Args:
        state: State after the previous line
        line: Next line

    Returns:
        DATA for a non-empty line; for an empty line EMPTY1 after EMPTY0,
        otherwise EMPTY0. Lines leading to EMPTY0 are discarded.
    """
    if line != "":
        return BlankState.DATA
    if state is BlankState.EMPTY0:
        return BlankState.EMPTY1
    return BlankState.EMPTY0


def blankRuns_dedupe(lines: Iterable[str], state: BlankState = BlankState.DATA) -> Iterator[str]:
    """
    Keep only the even-ordinal blank lines of each blank run

    A run of N consecutive empty lines comes out as N // 2 empty lines;
    non-empty lines always pass through.

    Args:
        lines: Byte-code block lines
        state: Starting state

    Yields:
        The retained lines, in order
    """
    for line in lines:
        state = blankState_advance(state, line)
        if state is not BlankState.EMPTY0:
            yield line
