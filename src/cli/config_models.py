"""Pydantic configuration models for moodlog."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from mood.history import HISTORY_KEY


class PathsConfig(BaseModel):
    """File paths configuration."""

    store_db: Path = Path("~/moodlog/moodlog.db")

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.store_db = self.store_db.expanduser()
        return self


class StorageConfig(BaseModel):
    """Key under which the history list is stored."""

    history_key: str = HISTORY_KEY

    @field_validator("history_key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("history_key must not be empty")
        return v


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    json_mode: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class DisplayConfig(BaseModel):
    """History and chart display defaults."""

    history_limit: int = Field(default=20, ge=1)
    hour_label_step: int = Field(default=3, ge=1, le=24)


class MoodlogConfig(BaseModel):
    """Main configuration model."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "MoodlogConfig":
        """Create config from a parsed YAML dict."""
        paths = data.get("paths")
        if isinstance(paths, dict) and isinstance(paths.get("store_db"), str):
            data = {**data, "paths": {**paths, "store_db": Path(paths["store_db"])}}
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="python")
