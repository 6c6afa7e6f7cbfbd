import enum
from pathlib import Path
from typing import Union

from figureio.exceptions import UnsupportedFormatError
from figureio.io.fs import get_file_ext


class FileFormat(str, enum.Enum):
    """Supported figure file formats."""

    TXT = "txt"
    JSON = "json"
    XML = "xml"

    @property
    def suffix(self) -> str:
        return f".{self.value}"

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "FileFormat":
        """
        Resolve the format from the file extension.

        Matching is literal and case-sensitive: ``figures.TXT`` is not a TXT file.
        File content is never inspected.
        """
        ext = get_file_ext(str(path))
        for file_format in cls:
            if file_format.suffix == ext:
                return file_format
        raise UnsupportedFormatError(str(path), ext or None)
