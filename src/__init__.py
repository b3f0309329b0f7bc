"""
dmpextract - Program object extractor for continuum dumps

Splits a continuum dump into one .pe file per program object, laid out by
the controller/object nesting found in the dump.
"""

__version__ = "1.0.0"

from .lib import Extractor, lines_read, LOG, state_connectToLogger

__all__ = ["Extractor", "lines_read", "LOG", "state_connectToLogger", "__version__"]
