"""
Outcomes of load and save operations.
"""

from __future__ import annotations

import enum
from typing import List, Optional

from pydantic import Field

from figureio.dto.base import BaseInfo
from figureio.dto.figure import Figure
from figureio.dto.format import FileFormat


class Outcome(str, enum.Enum):
    SUCCESS = "success"
    # valid input without records, or a save request with nothing to save
    EMPTY = "empty"
    PARSE_ERROR = "parse_error"
    UNSUPPORTED_FORMAT = "unsupported_format"
    IO_ERROR = "io_error"


class LoadResult(BaseInfo):
    path: str = Field(..., description="Path the figures were loaded from")
    format: Optional[FileFormat] = Field(default=None, description="Resolved file format")
    outcome: Outcome
    figures: List[Figure] = Field(
        default_factory=list,
        description="Figures produced by this load (the parsed prefix on TXT parse errors)",
    )
    message: Optional[str] = None

    @property
    def count(self) -> int:
        return len(self.figures)

    @property
    def ok(self) -> bool:
        return self.outcome in (Outcome.SUCCESS, Outcome.EMPTY)


class SaveResult(BaseInfo):
    path: str = Field(..., description="Destination path")
    format: Optional[FileFormat] = Field(default=None, description="Resolved file format")
    outcome: Outcome
    count: int = Field(default=0, description="Number of figures written")
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome == Outcome.SUCCESS
