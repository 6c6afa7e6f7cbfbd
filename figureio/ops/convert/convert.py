from pathlib import Path
from typing import Dict, Optional, Type, Union

from figureio.dto.format import FileFormat
from figureio.exceptions import UnsupportedFormatError
from figureio.io.settings import FigureSettings
from figureio.ops.convert.base import FigureConverter
from figureio.ops.convert.json import JsonConverter
from figureio.ops.convert.txt import TxtConverter
from figureio.ops.convert.xml import XmlConverter

converters: Dict[FileFormat, Type[FigureConverter]] = {
    FileFormat.TXT: TxtConverter,
    FileFormat.JSON: JsonConverter,
    FileFormat.XML: XmlConverter,
}


def get_converter(
    file_format: Union[FileFormat, str], settings: Optional[FigureSettings] = None
) -> FigureConverter:
    file_format = FileFormat(file_format)
    return converters[file_format](settings)


def resolve_converter(
    path: Union[str, Path], settings: Optional[FigureSettings] = None
) -> FigureConverter:
    """Pick the converter for ``path`` from its extension."""
    return get_converter(FileFormat.from_path(path), settings)


def can_convert(path: Union[str, Path]) -> bool:
    try:
        FileFormat.from_path(path)
        return True
    except UnsupportedFormatError:
        return False
