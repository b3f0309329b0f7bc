#!/usr/bin/env python3
"""
dmpextract - Program object extractor for continuum dumps

Reads a continuum dump and writes the byte-code of every program object it
contains to its own .pe file. The nesting of controllers and objects in the
dump becomes the directory layout of the output.

Pipeline:
    - env_check: Validate the dump file and resolve the destination
    - dump_extract: Scan, group, extract and write every object
    - results_report: Summarize what was written

Usage:
    dmpextract <dumpfile> [destination]

    The destination defaults to the current working directory.

Examples:
    # Extract into the current directory
    dmpextract site.dmp

    # Extract into out/, keep going if an object cannot be written
    dmpextract site.dmp out/ --continueOnError

    # Verbose output
    dmpextract site.dmp out/ -vv

    # Print the version
    dmpextract version
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter
from typing import List, Optional

from . import __version__
from .config import appsettings
from .lib import Extractor, lines_read, LOG, state_connectToLogger
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
     _           ____      _                  _
  __| |_ __ ___ |  _ \  __| |_ _ __ __ _  ___| |_
 / _` | '_ ` _ \| |_) |/ _ \ \ / '__/ _` |/ __| __|
| (_| | | | | | |  __/|  __/>  <| | | (_| | (__| |_
 \__,_|_| |_| |_|_|    \___/_/\_\_|  \__,_|\___|\__|

  Continuum dump program object extractor
"""

# Define CLI arguments
parser = ArgumentParser(
    prog="dmpextract",
    description="dmpextract - write each program object of a continuum dump to its own .pe file",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "dumpfile", nargs="?", default=None, type=str, help="Continuum dump file to extract (or 'version')"
)

parser.add_argument(
    "destination",
    nargs="?",
    default=None,
    type=str,
    help="Directory that receives the object files. Defaults to the current directory",
)

parser.add_argument(
    "--continueOnError",
    action="store_true",
    default=False,
    help="Skip objects whose file cannot be written instead of aborting the run",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument(
    "-V", "-version", "--version", action="version", version=f"%(prog)s {__version__}"
)


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve paths.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - dumpPath: Resolved path to the dump file
            - outputdir: Destination directory
            - envOK: True if environment is valid

    Exits:
        1 if the dump file does not exist
    """
    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    dump_path = Path(state.dumpfile)
    if not dump_path.is_file():
        print(f"Error: Dump file not found: {dump_path}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.dumpPath = dump_path
    state.outputdir = Path(state.destination)
    LOG(f"Dump file: {state.dumpPath}", level=2)
    LOG(f"Output directory: {state.outputdir}", level=2)

    state.envOK = True
    return state


def dump_extract(inputstate: ProgramState) -> ProgramState:
    """
    Extract every program object of the dump into the output directory.

    Args:
        inputstate: Program state with dumpPath and outputdir set

    Returns:
        ProgramState with added field:
            - extractResult: ExtractResult summary

    Exits:
        1 if the dump cannot be read, or an object write fails while not
        continuing on error
    """
    state = inputstate.copy()

    LOG(f"Extracting objects from {state.dumpPath.name}...", level=1)

    extractor = Extractor(
        lines_read(state.dumpPath, encoding=appsettings.input_encoding),
        output_dir=str(state.outputdir),
        continue_on_error=state.continueOnError or appsettings.continue_on_write_error,
    )
    try:
        state.extractResult = extractor.extract()
    except UnicodeDecodeError as e:
        print(f"Error reading dump file: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        if state.verbosity >= 3:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display extraction results.

    Args:
        inputstate: Program state with extractResult populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if extractResult is None
    """
    state: ProgramState = inputstate.copy()
    result = state.extractResult
    if result is None:
        print("Error: Extraction failed", file=sys.stderr)
        sys.exit(1)

    LOG(f"Objects found:   {result.group_count}", level=1)
    LOG(f"Objects written: {len(result.written)}", level=1)
    for path in result.written:
        LOG(f"  {path}", level=2)
    for path in result.skipped:
        print(f"Error: Could not write {path}", file=sys.stderr)
    return state


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point - extract program objects from a continuum dump.

    Args:
        argv: Command line arguments (default: sys.argv[1:])

    Returns:
        Process exit code: 0 on success, 1 if any object was skipped
    """
    options: Namespace = parser.parse_args(argv)

    if options.dumpfile is None:
        parser.print_usage()
        return 0

    if options.dumpfile == "version":
        print(f"{parser.prog} {__version__}")
        return 0

    state: ProgramState = ProgramState.state_createFromNamespace(options)

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    final: ProgramState = pipeline(state, env_check, dump_extract, results_report)
    return 0 if final.extractResult and final.extractResult.status else 1


if __name__ == "__main__":
    sys.exit(main())
