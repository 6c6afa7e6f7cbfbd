from __future__ import annotations

import math
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from figureio.dto.figure import Figure
from figureio.dto.format import FileFormat
from figureio.exceptions import ParseError
from figureio.io.fs import read_text, write_text
from figureio.io.settings import FigureSettings


def format_number(value: float) -> str:
    """Shortest text that parses back to ``value``; integral values drop the ``.0``."""
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


class FigureConverter(ABC):
    """Base class for reading and writing figure lists in one file format."""

    #: File format the converter reads and writes.
    file_format: FileFormat
    #: Suffix of files handled by the converter.
    output_suffix: str = ""
    #: Reported when valid input holds no figures.
    empty_message: str = "No data"

    def __init__(self, settings: Optional[FigureSettings] = None):
        self.settings = settings or FigureSettings()

    @abstractmethod
    def decode(self, content: Any) -> List[Figure]:
        """Turn raw file content into figures. Raises :class:`ParseError`."""

    @abstractmethod
    def encode(self, figures: Sequence[Figure]) -> Any:
        """Turn figures into raw file content."""

    def read_source(self, path: Union[str, Path]) -> List[Figure]:
        """Read figures from a file."""
        try:
            content = read_text(path, encoding=self.settings.FIGUREIO_ENCODING)
        except UnicodeDecodeError as exc:
            encoding = self.settings.FIGUREIO_ENCODING
            raise ParseError(f"File is not valid {encoding} text: {exc}") from exc
        return self.decode(content)

    def write_target(self, figures: Sequence[Figure], path: Union[str, Path]) -> None:
        """Write figures to a file, replacing its content."""
        write_text(path, self.encode(figures), encoding=self.settings.FIGUREIO_ENCODING)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"{self.__class__.__name__}(file_format={self.file_format})"


__all__ = ["FigureConverter", "format_number"]
