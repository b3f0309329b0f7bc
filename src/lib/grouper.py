"""
Object grouper

Collects tagged lines into one group per rendered path. A path can come
back after other sections were read (a sibling re-opened under the same
name), so the whole stream is buffered into an insertion-ordered mapping
before any group is returned.
"""

from typing import Dict, Iterable, List

from ..models.scanner import TaggedLine, ObjectGroup
from .log import LOG


def lines_group(tagged: Iterable[TaggedLine]) -> List[ObjectGroup]:
    """
    Group tagged lines by their rendered owning path

    Args:
        tagged: Tracker output, in file order

    Returns:
        One ObjectGroup per non-empty path, in order of first occurrence.
        Each group holds every line tagged with its path, in encounter
        order. Lines outside any section (empty path) are dropped.
    """
    groups: Dict[str, List[str]] = {}
    dropped = 0

    for item in tagged:
        key = item.key
        if not key:
            dropped += 1
            continue
        groups.setdefault(key, []).append(item.line)

    LOG(f"Grouped lines into {len(groups)} objects ({dropped} lines outside any object)", level=2)
    return [ObjectGroup(path=key, lines=lines) for key, lines in groups.items()]
