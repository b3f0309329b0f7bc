"""
Line source for dump files

Reads a dump lazily, one line at a time, with line terminators removed.
"""

from pathlib import Path
from typing import Iterator, Union


def lines_read(dump_file: Union[str, Path], encoding: str = "utf-8-sig") -> Iterator[str]:
    """
    Yield the lines of a dump file in order

    Universal newline handling applies, so "\\n", "\\r\\n" and "\\r"
    terminators are all removed.

    Args:
        dump_file: Path to the dump
        encoding: Text encoding of the dump

    Yields:
        Each line without its terminator

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the content does not match ``encoding``
    """
    with open(dump_file, "r", encoding=encoding) as f:
        for line in f:
            yield line.rstrip("\n")
