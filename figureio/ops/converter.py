from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from figureio.dto.figure import Figure
from figureio.dto.result import LoadResult, Outcome, SaveResult
from figureio.exceptions import ParseError, UnsupportedFormatError
from figureio.io.settings import FigureSettings
from figureio.ops.convert.convert import resolve_converter

logger = logging.getLogger(__name__)

NOTHING_TO_SAVE = "Nothing to save"


class Converter:
    """
    Loads and saves figure lists, dispatching on the file extension.

    A converter instance is one session: every successful (or partially
    successful) load appends its figures to :attr:`figures` in load order,
    whatever the file format. Errors never leave :meth:`load` or :meth:`save`;
    they are reported through the returned result.
    """

    def __init__(self, settings: Optional[FigureSettings] = None):
        self.settings = settings or FigureSettings()
        self._figures: List[Figure] = []

    @property
    def figures(self) -> List[Figure]:
        """Figures accumulated by this session, in load order."""
        return list(self._figures)

    def add(self, figure: Figure) -> None:
        self._figures.append(figure)

    def clear(self) -> None:
        self._figures.clear()

    # --------------------------------------------------------------------- Load
    def load(self, path: Union[str, Path]) -> LoadResult:
        """Read figures from ``path`` and append them to the session."""
        path = str(path)
        try:
            converter = resolve_converter(path, self.settings)
        except UnsupportedFormatError as exc:
            logger.warning(str(exc))
            return LoadResult(path=path, outcome=Outcome.UNSUPPORTED_FORMAT, message=str(exc))

        file_format = converter.file_format
        try:
            figures = converter.read_source(path)
        except ParseError as exc:
            logger.error(f"Failed to parse {file_format.value.upper()} file '{path}': {exc}")
            self._figures.extend(exc.figures)
            return LoadResult(
                path=path,
                format=file_format,
                outcome=Outcome.PARSE_ERROR,
                figures=exc.figures,
                message=str(exc),
            )
        except OSError as exc:
            logger.error(f"Failed to read '{path}': {exc}")
            return LoadResult(
                path=path, format=file_format, outcome=Outcome.IO_ERROR, message=str(exc)
            )

        if not figures:
            logger.info(f"{converter.empty_message} in {file_format.value.upper()} file '{path}'")
            return LoadResult(
                path=path,
                format=file_format,
                outcome=Outcome.EMPTY,
                message=converter.empty_message,
            )

        self._figures.extend(figures)
        logger.info(f"Loaded {len(figures)} figure(s) from {file_format.value.upper()} file '{path}'")
        return LoadResult(path=path, format=file_format, outcome=Outcome.SUCCESS, figures=figures)

    # --------------------------------------------------------------------- Save
    def save(
        self, path: Union[str, Path], figures: Optional[Sequence[Figure]] = None
    ) -> SaveResult:
        """Write ``figures`` (the session figures by default) to ``path``, replacing it."""
        path = str(path)
        figures = self._figures if figures is None else list(figures)
        try:
            converter = resolve_converter(path, self.settings)
        except UnsupportedFormatError as exc:
            logger.warning(str(exc))
            return SaveResult(path=path, outcome=Outcome.UNSUPPORTED_FORMAT, message=str(exc))

        file_format = converter.file_format
        if not figures:
            logger.info(f"{NOTHING_TO_SAVE}: '{path}' was not written")
            return SaveResult(
                path=path, format=file_format, outcome=Outcome.EMPTY, message=NOTHING_TO_SAVE
            )

        try:
            converter.write_target(figures, path)
        except (OSError, UnicodeEncodeError) as exc:
            logger.error(f"Failed to write '{path}': {exc}")
            return SaveResult(
                path=path, format=file_format, outcome=Outcome.IO_ERROR, message=str(exc)
            )

        logger.info(f"Saved {len(figures)} figure(s) to {file_format.value.upper()} file '{path}'")
        return SaveResult(
            path=path, format=file_format, outcome=Outcome.SUCCESS, count=len(figures)
        )

    # --------------------------------------------------------------------- Convert
    def convert(
        self, sources: Iterable[Union[str, Path]], destination: Union[str, Path]
    ) -> Tuple[List[LoadResult], SaveResult]:
        """Load every source in order, then save everything accumulated to ``destination``."""
        results = [self.load(source) for source in sources]
        return results, self.save(destination)

    def __len__(self) -> int:
        return len(self._figures)


__all__ = ["Converter", "NOTHING_TO_SAVE"]
