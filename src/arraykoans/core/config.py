import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "ARRAYKOANS_"


def default_settings_path() -> Path:
    return Path().home() / ".arraykoans.json"


class Settings(BaseModel):
    """Runtime settings for the koan checker and its logging."""

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Optional[str] = None
    SHOW_PROGRESS: bool = True
    SETTINGS_PATH: Path = Field(default_factory=default_settings_path)

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'.")
        return level

    @classmethod
    def load(
        cls,
        path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "Settings":
        """Build settings from an optional JSON file overlaid with environment variables.

        Args:
            path: Settings file. Defaults to ``ARRAYKOANS_SETTINGS_PATH`` or
                ``~/.arraykoans.json``. A missing file is not an error.
            environ: Environment mapping, ``os.environ`` by default.

        Returns:
            Validated settings.

        Raises:
            json.JSONDecodeError: If the settings file is not valid JSON.
            ValueError: If the settings file does not hold a JSON object.
            pydantic.ValidationError: If a value fails validation.
        """
        environ = os.environ if environ is None else environ

        if path is None:
            env_path = environ.get(f"{ENV_PREFIX}SETTINGS_PATH")
            path = Path(env_path) if env_path else default_settings_path()

        values: Dict[str, Any] = {"SETTINGS_PATH": path}

        if path.exists():
            with open(path, "r", encoding="utf-8") as f:
                file_values = json.load(f)
            if not isinstance(file_values, dict):
                raise ValueError(
                    f"Settings file {path} must hold a JSON object, "
                    f"got {type(file_values).__name__}."
                )
            values.update({key.upper(): value for key, value in file_values.items()})

        # Environment wins over the file
        for field_name in cls.model_fields:
            env_value = environ.get(f"{ENV_PREFIX}{field_name}")
            if env_value is not None and field_name != "SETTINGS_PATH":
                values[field_name] = env_value

        return cls(**values)
