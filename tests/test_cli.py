"""
Command line tests

Tests the dmpextract entry point: usage, version, extraction runs and
exit codes.
"""

import tempfile
from pathlib import Path

import pytest

from dmpextract import __version__
from dmpextract.__main__ import main


DUMP = "BeginController : A\nObject : B\nByteCode\nX\n\n\nY\nEndByteCode\nEndObject\nEndController\n"


class TestBanner:
    """Test usage and version output"""

    def test_no_arguments_prints_usage(self, capsys):
        """No arguments prints usage and succeeds"""
        assert main([]) == 0
        assert "usage: dmpextract" in capsys.readouterr().out

    def test_version_word(self, capsys):
        """'version' prints name and version"""
        assert main(["version"]) == 0
        assert capsys.readouterr().out.strip() == f"dmpextract {__version__}"

    @pytest.mark.parametrize("flag", ["-version", "--version", "-V"])
    def test_version_flags(self, flag, capsys):
        """Version flags print name and version and exit cleanly"""
        with pytest.raises(SystemExit) as excinfo:
            main([flag])
        assert excinfo.value.code == 0
        assert f"dmpextract {__version__}" in capsys.readouterr().out


class TestExtraction:
    """Test extraction runs through the CLI"""

    def test_extract_to_destination(self):
        """Dump and destination arguments"""
        with tempfile.TemporaryDirectory() as tmpdir:
            dump = Path(tmpdir) / "site.dmp"
            dump.write_text(DUMP)
            out = Path(tmpdir) / "out"

            assert main([str(dump), str(out)]) == 0
            assert (out / "A" / "B.pe").read_text() == "X\n\nY\n"
            assert not (out / "A.pe").exists()

    def test_destination_defaults_to_cwd(self, monkeypatch):
        """Without a destination, objects land in the working directory"""
        with tempfile.TemporaryDirectory() as tmpdir:
            dump = Path(tmpdir) / "site.dmp"
            dump.write_text(DUMP)
            workdir = Path(tmpdir) / "work"
            workdir.mkdir()
            monkeypatch.chdir(workdir)

            assert main([str(dump)]) == 0
            assert (workdir / "A" / "B.pe").exists()

    def test_verbose_run(self):
        """Verbosity flags do not change the result"""
        with tempfile.TemporaryDirectory() as tmpdir:
            dump = Path(tmpdir) / "site.dmp"
            dump.write_text(DUMP)

            assert main([str(dump), tmpdir, "-vv"]) == 0
            assert (Path(tmpdir) / "A" / "B.pe").exists()

    def test_undecodable_dump(self, capsys):
        """A dump that is not valid in the input encoding exits with status 1"""
        with tempfile.TemporaryDirectory() as tmpdir:
            dump = Path(tmpdir) / "site.dmp"
            dump.write_bytes(b"Object : A\nByteCode\n\xff\xfe\nEndByteCode\nEndObject\n")

            with pytest.raises(SystemExit) as excinfo:
                main([str(dump), tmpdir])
            assert excinfo.value.code == 1
            assert "Error reading dump file" in capsys.readouterr().err
            assert not (Path(tmpdir) / "A.pe").exists()

    def test_missing_dump(self, capsys):
        """A missing dump file exits with status 1"""
        with pytest.raises(SystemExit) as excinfo:
            main(["/nonexistent/site.dmp"])
        assert excinfo.value.code == 1
        assert "Dump file not found" in capsys.readouterr().err


class TestWriteErrors:
    """Test the exit status for failed object writes"""

    def test_abort(self, capsys):
        """A failed write aborts with status 1"""
        with tempfile.TemporaryDirectory() as tmpdir:
            dump = Path(tmpdir) / "site.dmp"
            dump.write_text(DUMP)
            out = Path(tmpdir) / "out"
            (out / "A" / "B.pe").mkdir(parents=True)

            with pytest.raises(SystemExit) as excinfo:
                main([str(dump), str(out)])
            assert excinfo.value.code == 1
            assert "Error" in capsys.readouterr().err

    def test_continue_on_error(self, capsys):
        """--continueOnError finishes the run but reports failure"""
        with tempfile.TemporaryDirectory() as tmpdir:
            dump = Path(tmpdir) / "site.dmp"
            dump.write_text(DUMP + "Object : C\nByteCode\nZ\nEndByteCode\nEndObject\n")
            out = Path(tmpdir) / "out"
            (out / "A" / "B.pe").mkdir(parents=True)

            assert main([str(dump), str(out), "--continueOnError"]) == 1
            assert (out / "C.pe").read_text() == "Z\n"
            assert "Could not write" in capsys.readouterr().err
