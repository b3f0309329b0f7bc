"""
Scanner-specific data models

Type-safe structures passed between the line-scanning stages: tracker
state, tagged lines, object groups and output records.
"""

from enum import Enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple


@dataclass(frozen=True)
class TrackerState:
    """
    Accumulator of the path tracker fold

    Attributes:
        path: Values of the currently open sections, outermost first
        previous_line: The line read immediately before the current one.
                       A section end here pops ``path`` on the next step.

    Example:
        After reading "BeginController : A" then "Object : B":
        TrackerState(path=("A", "B"), previous_line="Object : B")
    """
    path: Tuple[str, ...] = ()
    previous_line: str = ""

    @property
    def key(self) -> str:
        """Rendered path, segments joined by '/' (empty segments skipped)"""
        return path_render(self.path)


@dataclass(frozen=True)
class TaggedLine:
    """
    A dump line together with the path that owns it

    Attributes:
        path: Owning path segments at the time the line was read
        line: The line text, unchanged
    """
    path: Tuple[str, ...]
    line: str

    @property
    def key(self) -> str:
        return path_render(self.path)


@dataclass
class ObjectGroup:
    """
    All lines owned by one rendered path, in encounter order

    Lines from non-contiguous occurrences of the same path are merged
    into a single group.
    """
    path: str
    lines: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class OutputRecord:
    """
    One object file to be written

    Attributes:
        file_path: Destination file (destination / group path + extension)
        lines: Deduplicated byte-code lines, written one per line
    """
    file_path: Path
    lines: Tuple[str, ...]


class BlankState(Enum):
    """
    States of the blank-run deduplicator

    DATA:   last line was non-empty
    EMPTY0: last line was an odd-ordinal blank in its run (dropped)
    EMPTY1: last line was an even-ordinal blank in its run (kept)
    """
    DATA = "data"
    EMPTY0 = "empty0"
    EMPTY1 = "empty1"


@dataclass
class ExtractResult:
    """
    Summary of one extraction run

    Attributes:
        status: True when every object with byte-code was written
        group_count: Number of object groups found in the dump
        written: Files written, in group order
        skipped: Files whose write failed (only when continuing on error)
    """
    status: bool = True
    group_count: int = 0
    written: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)


def path_render(path: Tuple[str, ...]) -> str:
    """
    Render path segments as a directory-style key

    Args:
        path: Path segments, outermost first

    Returns:
        Segments joined with '/'; empty segments are left out, so an
        empty path (or one made only of empty values) renders as ""

    Example:
        >>> path_render(("A", "B"))
        'A/B'
    """
    return "/".join(segment for segment in path if segment)
