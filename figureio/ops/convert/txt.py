"""
Line-delimited plain text: three non-blank lines per figure (name, width, height).

Blank lines are ignored on read, so a figure with an empty or whitespace-only
name cannot be written in a form that reads back.
"""

from __future__ import annotations

import enum
import logging
import re
from typing import List, Sequence

from figureio.dto.figure import Figure
from figureio.dto.format import FileFormat
from figureio.exceptions import ParseError
from figureio.ops.convert.base import FigureConverter, format_number

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class GroupState(enum.Enum):
    """Position inside the current three-line group."""

    AWAITING_NAME = "awaiting_name"
    AWAITING_WIDTH = "awaiting_width"
    AWAITING_HEIGHT = "awaiting_height"


def parse_dimension(text: str, field: str, line_no: int, figures: Sequence[Figure]) -> float:
    try:
        return float(text.strip())
    except ValueError:
        raise ParseError(
            f"Line {line_no}: expected a number for {field}, got {text.strip()!r}",
            figures=figures,
            line=line_no,
        ) from None


class TxtConverter(FigureConverter):
    """Read and write figures as plain text, one field per line."""

    file_format = FileFormat.TXT
    output_suffix = ".txt"
    empty_message = "Insufficient data"

    def decode(self, content: str) -> List[Figure]:
        figures: List[Figure] = []
        state = GroupState.AWAITING_NAME
        name = None
        width = None
        group_start = 0

        for line_no, line in enumerate(_LINE_BREAK.split(content), start=1):
            if not line.strip():
                continue

            if state is GroupState.AWAITING_NAME:
                name = line
                group_start = line_no
                state = GroupState.AWAITING_WIDTH
            elif state is GroupState.AWAITING_WIDTH:
                width = parse_dimension(line, "width", line_no, figures)
                state = GroupState.AWAITING_HEIGHT
            else:
                height = parse_dimension(line, "height", line_no, figures)
                figures.append(Figure(name=name, width=width, height=height))
                name = width = None
                state = GroupState.AWAITING_NAME

        if state is not GroupState.AWAITING_NAME:
            logger.warning(
                f"Discarding incomplete figure {name!r} starting at line {group_start}"
            )
        return figures

    def encode(self, figures: Sequence[Figure]) -> str:
        lines = []
        for index, figure in enumerate(figures, start=1):
            if not figure.name.strip():
                # blank lines are skipped on read, so the group would shift
                logger.warning(
                    f"Figure #{index} has a blank name; the TXT file will not read back"
                )
            lines.extend([figure.name, format_number(figure.width), format_number(figure.height)])
        return "".join(f"{line}\n" for line in lines)
