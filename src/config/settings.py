"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use DMPEXTRACT_ prefix (e.g., DMPEXTRACT_OBJECT_EXTENSION=.txt).

Settings can also be loaded from a .env file in the working directory.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use DMPEXTRACT_ prefix. The marker vocabulary of
    the dump format is fixed and deliberately absent here.

    Examples:
        DMPEXTRACT_INPUT_ENCODING=cp1252
        DMPEXTRACT_CONTINUE_ON_WRITE_ERROR=true
    """

    model_config = SettingsConfigDict(
        env_prefix="DMPEXTRACT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Output configuration
    object_extension: str = Field(
        default=".pe",
        description="Suffix appended to each object's path to form its file name",
    )

    output_encoding: str = Field(
        default="utf-8",
        description="Encoding used when writing object files",
    )

    output_newline: str = Field(
        default="\n",
        description="Terminator written after every object line",
    )

    # Input configuration
    input_encoding: str = Field(
        default="utf-8-sig",
        description="Encoding used when reading the dump (utf-8-sig drops a leading BOM)",
    )

    # Error policy
    continue_on_write_error: bool = Field(
        default=False,
        description="Skip objects whose file cannot be written instead of aborting the run",
    )


# Singleton instance - import this in your code
appsettings = AppSettings()
