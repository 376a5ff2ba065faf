"""Configuration models using Pydantic for validation."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_PROGRESS_INTERVAL = 500


class MoveWebsiteFilesConfiguration(BaseModel):
    """Settings of the MoveWebsiteFiles plug-in, persisted as an XML fragment."""

    use_direct_move: bool = Field(
        default=False,
        description=(
            "Move whole folders at once instead of moving the website files one by one. "
            "Faster, but fails when the output folder already contains a folder of the same name."
        ),
    )

    def clone(self) -> "MoveWebsiteFilesConfiguration":
        """Return an independent copy for an editing session."""
        return self.model_copy(deep=True)

    class Config:
        """Pydantic config."""

        validate_assignment = True
        extra = "forbid"


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_dir: Path = Field(default=Path("logs"), description="Directory for log files")
    max_bytes: int = Field(
        default=10 * 1024 * 1024, ge=1024, description="Max log file size before rotation (bytes)"
    )
    backup_count: int = Field(default=5, ge=1, description="Number of rotated log files to keep")
    console_enabled: bool = Field(default=True, description="Enable console logging")
    file_enabled: bool = Field(default=False, description="Enable file logging")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper


class RelocationSettings(BaseModel):
    """Defaults for relocations started from the command line."""

    progress_interval: int = Field(
        default=DEFAULT_PROGRESS_INTERVAL,
        ge=1,
        description="Report progress every N files when moving files one by one",
    )
    plugin_config: Path | None = Field(
        default=None, description="Saved MoveWebsiteFiles configuration fragment (XML)"
    )


class WebsiteMoverConfig(BaseModel):
    """Main application settings for websitemover."""

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )

    relocation: RelocationSettings = Field(
        default_factory=RelocationSettings, description="Relocation defaults"
    )

    class Config:
        """Pydantic config."""

        validate_assignment = True
        extra = "forbid"  # Raise error on unknown fields
