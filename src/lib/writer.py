"""
Object writer

Builds output records from object groups and writes them to disk.
"""

from pathlib import Path
from typing import Optional

from ..models.scanner import ObjectGroup, OutputRecord
from .bytecode import byteCode_extract, blankRuns_dedupe
from .log import LOG


def record_build(group: ObjectGroup, destination: Path, extension: str = ".pe") -> Optional[OutputRecord]:
    """
    Turn one object group into an output record

    Args:
        group: Object group from the grouper
        destination: Root output directory
        extension: Suffix appended to the group path

    Returns:
        OutputRecord holding the deduplicated byte-code lines, or None when
        the group has no byte-code or the block is empty after repair
    """
    lines = tuple(blankRuns_dedupe(byteCode_extract(group.lines)))
    if not lines:
        LOG(f"No byte-code in {group.path}", level=3)
        return None
    # Always relative to destination, even for values like "/abs/name"
    relative = f"{group.path}{extension}".lstrip("/")
    return OutputRecord(file_path=Path(destination) / relative, lines=lines)


def record_write(
    record: OutputRecord,
    encoding: str = "utf-8",
    newline: str = "\n",
    root: Optional[Path] = None,
) -> Path:
    """
    Write one output record, overwriting any existing file

    Parent directories are created as needed.

    Args:
        record: Record to write
        encoding: Output text encoding
        newline: Terminator written after every line
        root: If given, the record must resolve to a path inside it

    Returns:
        The path written

    Raises:
        OSError: If the directory or the file cannot be created, or the
                 record's path resolves outside ``root`` (".." segments)
    """
    if root is not None and not record.file_path.resolve().is_relative_to(Path(root).resolve()):
        raise OSError(f"Object path escapes destination {root}: {record.file_path}")

    record.file_path.parent.mkdir(parents=True, exist_ok=True)
    content = "".join(f"{line}{newline}" for line in record.lines)
    record.file_path.write_text(content, encoding=encoding, newline="")
    LOG(f"Wrote {record.file_path} ({len(record.lines)} lines)", level=2)
    return record.file_path
