"""
Tests for the XML reader and writer.
"""

import pytest

from figureio.dto.figure import Figure
from figureio.exceptions import ParseError
from figureio.io.settings import FigureSettings
from figureio.ops.convert.xml import XmlConverter

SERIALIZER_OUTPUT = b"""<?xml version="1.0" encoding="utf-8"?>
<ArrayOfFigure xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" xmlns:xsd="http://www.w3.org/2001/XMLSchema">
    <Figure>
        <Name>Square</Name>
        <Width>4</Width>
        <Height>4</Height>
    </Figure>
    <Figure>
        <Name>Rect</Name>
        <Width>2.5</Width>
        <Height>0</Height>
    </Figure>
</ArrayOfFigure>
"""


@pytest.fixture
def converter():
    return XmlConverter()


class TestXmlDecode:

    def test_serializer_document(self, converter):
        assert converter.decode(SERIALIZER_OUTPUT) == [
            Figure(name="Square", width=4, height=4),
            Figure(name="Rect", width=2.5, height=0),
        ]

    def test_empty_root(self, converter):
        assert converter.decode(b"<ArrayOfFigure />") == []

    def test_empty_name(self, converter):
        figures = converter.decode(
            b"<ArrayOfFigure><Figure><Name /><Width>1</Width><Height>2</Height></Figure></ArrayOfFigure>"
        )
        assert figures == [Figure(name="", width=1, height=2)]

    @pytest.mark.parametrize(
        "content",
        [
            b"<ArrayOfFigure><Figure>",
            b"",
            b"<Figures />",
            b"<ArrayOfFigure><Figure><Name>A</Name><Height>2</Height></Figure></ArrayOfFigure>",
            b"<ArrayOfFigure><Figure><Name>A</Name><Width>x</Width><Height>2</Height></Figure></ArrayOfFigure>",
        ],
    )
    def test_malformed(self, converter, content):
        with pytest.raises(ParseError):
            converter.decode(content)


class TestXmlEncode:

    def test_indented_document(self, converter):
        content = converter.encode([Figure(name="Square", width=4, height=4.5)])

        assert content.decode("utf-8").splitlines() == [
            "<?xml version='1.0' encoding='utf-8'?>",
            "<ArrayOfFigure>",
            "    <Figure>",
            "        <Name>Square</Name>",
            "        <Width>4</Width>",
            "        <Height>4.5</Height>",
            "    </Figure>",
            "</ArrayOfFigure>",
        ]

    def test_indent_from_settings(self):
        converter = XmlConverter(FigureSettings(FIGUREIO_XML_INDENT=2))
        lines = converter.encode([Figure(name="A", width=1, height=1)]).decode("utf-8").splitlines()
        assert lines[2] == "  <Figure>"

    def test_round_trip(self, converter, tmp_path):
        figures = [
            Figure(name="Круг", width=0, height=0),
            Figure(name="<&> escaped", width=1.25, height=3e-5),
        ]
        path = tmp_path / "figures.xml"

        converter.write_target(figures, path)

        assert converter.read_source(path) == figures


if __name__ == "__main__":
    pytest.main([__file__])
