import os
from pathlib import Path
from typing import Union

_BOM = "\ufeff"


def get_file_ext(path: str) -> str:
    """
    Extracts file extension from a given path.

    :param path: Path to file.
    :type path: str
    :returns: File extension without name
    :rtype: :class:`str`
    :Usage example:

     .. code-block::

        from figureio.io.fs import get_file_ext

        file_ext = get_file_ext("/home/admin/work/figures/shapes.json")

        print(file_ext)
        # Output: .json
    """
    return os.path.splitext(os.path.basename(path))[1]


def ensure_parent_dir(path: Union[str, Path]) -> Path:
    """Create the parent directory of ``path`` if it does not exist and return ``path``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def read_text(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Read the whole file as text, dropping a leading byte order mark.

    :param path: Path to file.
    :type path: str or Path
    :param encoding: Text encoding.
    :type encoding: str
    :returns: File content
    :rtype: :class:`str`
    """
    with open(path, "r", encoding=encoding, newline="") as f:
        content = f.read()
    if content.startswith(_BOM):
        content = content[len(_BOM) :]
    return content


def write_text(path: Union[str, Path], content: str, encoding: str = "utf-8") -> None:
    """Overwrite ``path`` with ``content``."""
    path = ensure_parent_dir(path)
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(content)


def read_bytes(path: Union[str, Path]) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def write_bytes(path: Union[str, Path], content: bytes) -> None:
    path = ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(content)
