import json
import logging
import os
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, field_validator

__all__ = ["Settings", "settings"]

DEFAULT_CONFIG_PATH = Path().home() / ".loscore.json"


class Settings(BaseModel):
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'.")
        return level

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        config_path = config_path or DEFAULT_CONFIG_PATH

        file_values = {}
        if config_path.exists():
            with open(config_path, "r") as f:
                file_values = json.load(f)
            if not isinstance(file_values, dict):
                raise ValueError(
                    f"Config file {config_path} must hold a JSON object, "
                    f"got {type(file_values).__name__}."
                )

        values = {}
        log_level = os.getenv("LOSCORE_LOG_LEVEL", file_values.get("log_level"))
        if log_level is not None:
            values["LOG_LEVEL"] = log_level
        log_format = os.getenv("LOSCORE_LOG_FORMAT", file_values.get("log_format"))
        if log_format is not None:
            values["LOG_FORMAT"] = log_format

        return cls(**values)


settings = Settings.load()
