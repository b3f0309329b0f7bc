"""
dmpextract - Program object extractor for continuum dumps

Scanning library: path tracking, grouping, byte-code extraction and writing.
"""

__version__ = "1.0.0"

from .extractor import Extractor
from .source import lines_read
from .log import LOG, state_connectToLogger

__all__ = ["Extractor", "lines_read", "LOG", "state_connectToLogger", "__version__"]
