"""
Exceptions raised by figure readers and writers.

Readers and writers raise; :class:`figureio.ops.converter.Converter` catches
these at the load/save boundary and reports them as outcomes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional

if TYPE_CHECKING:
    from figureio.dto.figure import Figure


class FigureIOError(Exception):
    """Base class for all figureio errors."""


class UnsupportedFormatError(FigureIOError, ValueError):
    """The file extension is not one of the supported formats."""

    def __init__(self, path: str, extension: Optional[str] = None):
        self.path = path
        self.extension = extension
        shown = extension or "<none>"
        super().__init__(f"Unsupported file format {shown!r} for path: {path}")


class ParseError(FigureIOError, ValueError):
    """
    File content is not a well-formed figure list.

    ``figures`` holds the records completed before the failure. Only the TXT
    reader produces a partial prefix; JSON and XML parse atomically.
    """

    def __init__(
        self,
        message: str,
        *,
        figures: Optional[Iterable["Figure"]] = None,
        line: Optional[int] = None,
    ):
        super().__init__(message)
        self.figures: List["Figure"] = list(figures or [])
        self.line = line
