"""
Public package interface for figureio.

Read figure lists (name, width, height) from TXT, JSON or XML files and write
them back out in any of the three formats.
"""

from figureio.dto.figure import Figure
from figureio.dto.format import FileFormat
from figureio.dto.result import LoadResult, Outcome, SaveResult
from figureio.exceptions import FigureIOError, ParseError, UnsupportedFormatError
from figureio.io.settings import FigureSettings
from figureio.ops.converter import Converter

__all__ = [
    "Converter",
    "Figure",
    "FigureIOError",
    "FigureSettings",
    "FileFormat",
    "LoadResult",
    "Outcome",
    "ParseError",
    "SaveResult",
    "UnsupportedFormatError",
]
