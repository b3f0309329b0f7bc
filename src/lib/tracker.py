"""
Path tracker for nested dump sections

Turns the nested section start/end markers of a dump into an owning path
for every line. The tracker is a left fold over the line stream with the
accumulator TrackerState(path, previous_line).

Closing is delayed by one line: the end marker itself still belongs to the
section it closes, and the shorter path applies from the next line on.

Example:
    lines                    owning path
    BeginController : A      A
    Object : B               A/B
    EndObject                A/B
    EndController            A
    (anything)               (empty)
"""

from typing import Iterable, Iterator

from ..models.scanner import TrackerState, TaggedLine
from .markers import start_parse, end_is


def state_advance(state: TrackerState, line: str) -> TrackerState:
    """
    Fold one line into the tracker state

    Args:
        state: State after the previous line
        line: The line being read

    Returns:
        New state whose path is the owning path of ``line``. It already
        includes a section ``line`` opens and already excludes a section
        closed on the previous line.
    """
    path = state.path
    if end_is(state.previous_line):
        path = path[:-1]

    value = start_parse(line)
    if value is not None:
        path = path + (value,)

    return TrackerState(path=path, previous_line=line)


def lines_tag(lines: Iterable[str], state: TrackerState = TrackerState()) -> Iterator[TaggedLine]:
    """
    Tag every line with its owning path

    Args:
        lines: Dump lines in file order
        state: Starting state (empty path by default)

    Yields:
        TaggedLine for each input line, in order
    """
    for line in lines:
        state = state_advance(state, line)
        yield TaggedLine(path=state.path, line=line)
