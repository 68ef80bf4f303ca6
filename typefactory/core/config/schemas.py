"""Configuration schemas for validation"""

import logging
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoggingConfig(BaseModel):
    """Configuration for logging settings"""

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown logging level: {value!r}")
        return level


class FactoryConfig(BaseModel):
    """Main configuration schema for typefactory.

    These settings play the role of build-time switches: they are read when
    registries and registrations are first created, so change them with
    ``configure()`` before any production module is imported.
    """

    model_config = ConfigDict(extra="forbid")

    provider: Literal["standard", "host"] = "standard"
    variadic: bool = False
    strict_duplicates: bool = False
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
