"""
JSON array of ``{"Name": ..., "Width": ..., "Height": ...}`` objects.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from figureio.dto.figure import Figure
from figureio.dto.format import FileFormat
from figureio.exceptions import ParseError
from figureio.ops.convert.base import FigureConverter

_FIGURES = TypeAdapter(Optional[List[Figure]])


class JsonConverter(FigureConverter):
    """Read and write figures as a pretty-printed JSON array."""

    file_format = FileFormat.JSON
    output_suffix = ".json"

    def decode(self, content: str) -> List[Figure]:
        # an empty file reads as no data, like a literal null
        if not content.strip():
            return []
        try:
            figures = _FIGURES.validate_json(content)
        except ValidationError as exc:
            raise ParseError(f"Malformed JSON figure list: {exc}") from exc
        return figures or []

    def encode(self, figures: Sequence[Figure]) -> str:
        data = _FIGURES.dump_json(
            list(figures),
            indent=self.settings.FIGUREIO_JSON_INDENT or None,
            by_alias=True,
        )
        return data.decode("utf-8") + "\n"
