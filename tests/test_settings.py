"""
Settings tests

Tests defaults and environment overrides of AppSettings.
"""

from dmpextract.config import AppSettings


class TestAppSettings:
    """Test configuration sources"""

    def test_defaults(self, monkeypatch):
        """Defaults match the dump tool's conventions"""
        monkeypatch.delenv("DMPEXTRACT_OBJECT_EXTENSION", raising=False)
        settings = AppSettings(_env_file=None)

        assert settings.object_extension == ".pe"
        assert settings.input_encoding == "utf-8-sig"
        assert settings.output_encoding == "utf-8"
        assert settings.output_newline == "\n"
        assert settings.continue_on_write_error is False

    def test_environment_override(self, monkeypatch):
        """DMPEXTRACT_ variables override defaults"""
        monkeypatch.setenv("DMPEXTRACT_OBJECT_EXTENSION", ".txt")
        monkeypatch.setenv("DMPEXTRACT_CONTINUE_ON_WRITE_ERROR", "true")
        settings = AppSettings(_env_file=None)

        assert settings.object_extension == ".txt"
        assert settings.continue_on_write_error is True

