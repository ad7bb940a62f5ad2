"""Pydantic configuration models for DevKB."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

DEFAULT_MAX_FILE_SIZE = 1024 * 1024


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class DevKBConfig(BaseModel):
    """Contents of ``.devkb.json``. Keys are camelCase on disk."""

    model_config = ConfigDict(populate_by_name=True)

    data_dir: str = Field(".devkb", alias="dataDir")
    index_paths: list[str] = Field(
        default_factory=lambda: ["./src", "./lib", "./docs"], alias="indexPaths"
    )
    exclude_patterns: list[str] = Field(
        default_factory=lambda: ["node_modules", "dist", "build", ".git", "*.log"],
        alias="excludePatterns",
    )
    include_extensions: list[str] = Field(default_factory=list, alias="includeExtensions")
    max_file_size: int = Field(DEFAULT_MAX_FILE_SIZE, alias="maxFileSize", gt=0)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("data_dir")
    @classmethod
    def validate_data_dir(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("dataDir must not be empty")
        return v

    @classmethod
    def from_dict(cls, data: dict) -> "DevKBConfig":
        return cls.model_validate(data)
