"""
Settings for figure readers and writers.
"""

from __future__ import annotations

import codecs

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

FIGUREIO_ENV_FILENAME = "figureio.env"


class FigureSettings(BaseSettings):
    """
    Settings model for figure file handling via environment variables
    or other settings sources supported by `pydantic-settings`.
    """

    FIGUREIO_ENCODING: str = "utf-8"
    FIGUREIO_JSON_INDENT: int = Field(default=2, ge=0)
    FIGUREIO_XML_INDENT: int = Field(default=4, ge=0)
    FIGUREIO_LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=FIGUREIO_ENV_FILENAME,
        extra="ignore",
    )

    @field_validator("FIGUREIO_ENCODING")
    def validate_encoding(cls, v: str) -> str:
        """Reject encodings Python does not know."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown text encoding: {v!r}")
        return v
