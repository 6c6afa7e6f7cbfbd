"""
XML document shaped the way object-to-XML serializers write a list of figures::

    <ArrayOfFigure>
        <Figure>
            <Name>Square</Name>
            <Width>4</Width>
            <Height>4</Height>
        </Figure>
    </ArrayOfFigure>
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Sequence, Union

from pydantic import ValidationError

from figureio.dto.figure import Figure
from figureio.dto.format import FileFormat
from figureio.exceptions import ParseError
from figureio.io.fs import read_bytes, write_bytes
from figureio.ops.convert.base import FigureConverter, format_number

logger = logging.getLogger(__name__)

ROOT_TAG = "ArrayOfFigure"
ITEM_TAG = "Figure"
FIELD_TAGS = ("Name", "Width", "Height")


def _local_name(tag: str) -> str:
    # strip "{namespace}" prefix
    return tag.rsplit("}", 1)[-1]


class XmlConverter(FigureConverter):
    """Read and write figures as an indented XML document."""

    file_format = FileFormat.XML
    output_suffix = ".xml"

    def decode(self, content: Union[str, bytes]) -> List[Figure]:
        try:
            root = ET.fromstring(content)
        except ET.ParseError as exc:
            raise ParseError(f"Malformed XML document: {exc}") from exc

        if _local_name(root.tag) != ROOT_TAG:
            raise ParseError(f"Expected root element <{ROOT_TAG}>, got <{_local_name(root.tag)}>")

        figures = []
        for index, element in enumerate(root, start=1):
            if _local_name(element.tag) != ITEM_TAG:
                logger.debug(f"Skipping unexpected element <{element.tag}> at position {index}")
                continue
            values = {}
            for child in element:
                tag = _local_name(child.tag)
                if tag == "Name":
                    values[tag] = child.text or ""
                elif tag in FIELD_TAGS:
                    values[tag] = (child.text or "").strip()
            values.setdefault("Name", "")
            try:
                figures.append(Figure.model_validate(values))
            except ValidationError as exc:
                raise ParseError(f"Invalid <{ITEM_TAG}> element #{index}: {exc}") from exc
        return figures

    def encode(self, figures: Sequence[Figure]) -> bytes:
        root = ET.Element(ROOT_TAG)
        for figure in figures:
            item = ET.SubElement(root, ITEM_TAG)
            ET.SubElement(item, "Name").text = figure.name
            ET.SubElement(item, "Width").text = format_number(figure.width)
            ET.SubElement(item, "Height").text = format_number(figure.height)
        ET.indent(root, space=" " * self.settings.FIGUREIO_XML_INDENT)
        data = ET.tostring(root, encoding=self.settings.FIGUREIO_ENCODING, xml_declaration=True)
        return data + b"\n"

    def read_source(self, path: Union[str, Path]) -> List[Figure]:
        # the parser honours the encoding declared in the document
        return self.decode(read_bytes(path))

    def write_target(self, figures: Sequence[Figure], path: Union[str, Path]) -> None:
        write_bytes(path, self.encode(figures))
