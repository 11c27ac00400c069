"""Pydantic models describing pathkeeper configuration."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class RegistryConfig(BaseModel):
    """Home directory and the logical path entries resolved against it."""

    model_config = ConfigDict(extra="forbid")

    home: str
    case_sensitive: bool = True
    entries: Dict[str, str] = Field(default_factory=dict)
    required: List[str] = Field(default_factory=list)

    @field_validator("home")
    @classmethod
    def _validate_home(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("home must be a non-empty string.")
        return value

    @field_validator("entries")
    @classmethod
    def _validate_entries(cls, value: Dict[str, str]) -> Dict[str, str]:
        for key, raw in value.items():
            if not key.strip():
                raise ValueError("entry keys must be non-empty strings.")
            if not raw.strip():
                raise ValueError(f"entry '{key}' must map to a non-empty path.")
        return value

    @model_validator(mode="after")
    def _validate_required(self) -> "RegistryConfig":
        """Ensure every required key is also a configured entry."""

        missing = [key for key in self.required if key not in self.entries]
        if missing:
            raise ValueError(f"required keys not present in entries: {', '.join(missing)}.")
        return self


class LoggingConfig(BaseModel):
    """Logging level and optional log directory key."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    file_key: Optional[str] = None


class PathkeeperConfig(BaseModel):
    """Root configuration object."""

    model_config = ConfigDict(extra="forbid")

    registry: RegistryConfig
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def _validate_log_key(self) -> "PathkeeperConfig":
        file_key = self.logging.file_key
        if file_key is not None and file_key not in self.registry.entries:
            raise ValueError(f"logging.file_key '{file_key}' is not a registry entry.")
        return self


__all__ = ["LoggingConfig", "PathkeeperConfig", "RegistryConfig"]
