"""
Tests for settings loaded from the environment and env files.
"""

import pytest
from pydantic import ValidationError

from figureio.dto.figure import Figure
from figureio.dto.result import Outcome
from figureio.io.settings import FIGUREIO_ENV_FILENAME, FigureSettings
from figureio.ops.converter import Converter


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in FigureSettings.model_fields:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = FigureSettings()

    assert settings.FIGUREIO_ENCODING == "utf-8"
    assert settings.FIGUREIO_JSON_INDENT == 2
    assert settings.FIGUREIO_XML_INDENT == 4
    assert settings.FIGUREIO_LOG_LEVEL == "INFO"


def test_environment_override(monkeypatch):
    monkeypatch.setenv("FIGUREIO_JSON_INDENT", "4")

    assert FigureSettings().FIGUREIO_JSON_INDENT == 4


def test_negative_indent_is_rejected(monkeypatch):
    monkeypatch.setenv("FIGUREIO_XML_INDENT", "-1")

    with pytest.raises(ValidationError):
        FigureSettings()


def test_unknown_encoding_is_rejected(monkeypatch):
    monkeypatch.setenv("FIGUREIO_ENCODING", "no-such-codec")

    with pytest.raises(ValidationError):
        FigureSettings()

    with pytest.raises(ValidationError):
        FigureSettings(FIGUREIO_ENCODING="no-such-codec")


def test_env_file_sets_encoding(tmp_path):
    (tmp_path / FIGUREIO_ENV_FILENAME).write_text(
        "FIGUREIO_ENCODING=cp1251\nUNRELATED=1\n", encoding="utf-8"
    )
    (tmp_path / "legacy.txt").write_bytes("Квадрат\n4\n4\n".encode("cp1251"))

    settings = FigureSettings()
    result = Converter(settings).load(tmp_path / "legacy.txt")

    assert settings.FIGUREIO_ENCODING == "cp1251"
    assert result.outcome == Outcome.SUCCESS
    assert result.figures == [Figure(name="Квадрат", width=4, height=4)]


if __name__ == "__main__":
    pytest.main([__file__])
