"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing extraction stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Optional, Type, TypeVar, Callable, TYPE_CHECKING
from dataclasses import dataclass, field

if TYPE_CHECKING:
    from .scanner import ExtractResult


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the extraction pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the extraction progresses.

    Pipeline stages and their state additions:
        - Initial: dumpfile, destination, verbosity, continueOnError
        - env_check: dumpPath, outputdir, envOK
        - dump_extract: extractResult
        - results_report: (no additions, terminal stage)

    Attributes:
        dumpfile: Dump file path as given on the command line
        destination: Output directory as given on the command line
        verbosity: Logging verbosity level (1-3)
        continueOnError: Skip objects whose write fails instead of aborting
        envOK: Environment validation passed
        dumpPath: Resolved path to the dump file
        outputdir: Resolved output directory
        extractResult: Summary of the extraction (ExtractResult)
    """

    # CLI arguments
    dumpfile: str = field(default="")
    destination: str = field(default=".")
    verbosity: int = field(default=1)
    continueOnError: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    dumpPath: Path = field(default=Path("/"))
    outputdir: Path = field(default=Path("."))
    extractResult: Optional["ExtractResult"] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace
    ) -> "ProgramState":
        """
        Create ProgramState from an argparse Namespace.

        Options that are not ProgramState fields are ignored, and options
        left unset (None) fall back to the dataclass defaults.

        Args:
            options: Parsed CLI arguments (dumpfile, destination, etc.)

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        filtered_options = {
            k: v for k, v in vars(options).items() if k in valid_fields and v is not None
        }
        return cls(**filtered_options)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Run the extraction stages in order, threading the state through them.

    Each stage takes the state left by the previous one and returns a new
    copy with its own fields filled in. The CLI runs
    env_check -> dump_extract -> results_report.

    Args:
        initial_state: State built from the command line
        *stages: Stage functions, applied left to right

    Returns:
        State returned by the last stage
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
