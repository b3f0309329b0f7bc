"""
Extractor for program objects embedded in a continuum dump

Wires the scanning stages together in a single pass:

    lines -> lines_tag -> lines_group -> record_build -> record_write

Example:
    >>> extractor = Extractor(lines_read("site.dmp"), output_dir="out")
    >>> result = extractor.extract()
    >>> result.written
    [PosixPath('out/Ctrl1/ReadCompressors.pe'), ...]
"""

from pathlib import Path
from typing import Iterable, List, Optional

from ..config import AppSettings, appsettings
from ..models.scanner import ExtractResult, OutputRecord
from .grouper import lines_group
from .tracker import lines_tag
from .writer import record_build, record_write
from .log import LOG, WARN


class Extractor:
    """
    Extracts every object with byte-code from a stream of dump lines

    Responsibilities:
    - Tag lines with their owning path
    - Group lines per object path
    - Extract and repair each object's byte-code block
    - Write one file per object, applying the write-error policy
    """

    def __init__(
        self,
        lines: Iterable[str],
        output_dir: str,
        settings: Optional[AppSettings] = None,
        continue_on_error: Optional[bool] = None,
    ) -> None:
        """
        Initialize extractor

        Args:
            lines: Dump lines in file order (consumed once)
            output_dir: Root directory for the object files
            settings: Settings to use (default: the appsettings singleton)
            continue_on_error: Overrides settings.continue_on_write_error
        """
        self.lines = lines
        self.output_dir = Path(output_dir)
        self.settings = settings if settings is not None else appsettings
        if continue_on_error is None:
            continue_on_error = self.settings.continue_on_write_error
        self.continue_on_error = continue_on_error
        self.group_count = 0

    def records_build(self) -> List[OutputRecord]:
        """
        Scan the dump and build one record per object with byte-code

        Returns:
            Output records in order of the objects' first appearance
        """
        groups = lines_group(lines_tag(self.lines))
        self.group_count = len(groups)

        records = []
        for group in groups:
            record = record_build(group, self.output_dir, self.settings.object_extension)
            if record is not None:
                records.append(record)
        LOG(f"{len(records)} of {len(groups)} objects carry byte-code", level=2)
        return records

    def extract(self) -> ExtractResult:
        """
        Build and write every object file

        Returns:
            ExtractResult with the written (and, when continuing on error,
            skipped) files. status is False if any write was skipped.

        Raises:
            OSError: On the first failed write, unless continuing on error
        """
        LOG("Scanning dump...", level=2)
        records = self.records_build()
        result = ExtractResult(group_count=self.group_count)

        for record in records:
            try:
                result.written.append(
                    record_write(
                        record,
                        encoding=self.settings.output_encoding,
                        newline=self.settings.output_newline,
                        root=self.output_dir,
                    )
                )
            except OSError as e:
                if not self.continue_on_error:
                    raise
                WARN(f"Skipping {record.file_path}: {e}")
                result.skipped.append(record.file_path)
                result.status = False

        return result
