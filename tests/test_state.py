"""
Program state tests

Tests ProgramState construction from CLI options and the stage pipeline.
"""

from argparse import Namespace
from pathlib import Path

from dmpextract.models import ProgramState, pipeline


class TestProgramState:
    """Test state creation and copying"""

    def test_from_namespace(self):
        """Known options are taken, unknown and unset ones ignored"""
        options = Namespace(dumpfile="site.dmp", destination=None, verbosity=2, unrelated=True)
        state = ProgramState.state_createFromNamespace(options)

        assert state.dumpfile == "site.dmp"
        assert state.destination == "."
        assert state.verbosity == 2

    def test_copy_is_independent(self):
        """Changing a copy leaves the original alone"""
        state = ProgramState(dumpfile="a.dmp")
        copied = state.copy()
        copied.outputdir = Path("out")

        assert state.outputdir == Path(".")


class TestPipeline:
    """Test stage composition"""

    def test_stages_run_left_to_right(self):
        """Each stage sees the previous stage's state"""
        def first(state):
            state = state.copy()
            state.dumpfile += "1"
            return state

        def second(state):
            state = state.copy()
            state.dumpfile += "2"
            return state

        final = pipeline(ProgramState(dumpfile="s"), first, second)
        assert final.dumpfile == "s12"

    def test_no_stages(self):
        """An empty pipeline returns the initial state"""
        state = ProgramState()
        assert pipeline(state) is state
