"""
Tests for cli/main.py commands that need no network access.
"""
import json

import pytest
from typer.testing import CliRunner

from cli.main import app, console

runner = CliRunner()


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    monkeypatch.setattr(console, "width", 200)


class TestOfflineCommands:

    def test_books(self):
        result = runner.invoke(app, ["books", "--testament", "NT"])
        assert result.exit_code == 0
        assert "Matthew" in result.output
        assert "Genesis" not in result.output

    def test_resolve(self):
        result = runner.invoke(app, ["resolve", "Gen", "Hezekiah"])
        assert result.exit_code == 0
        assert "Genesis" in result.output
        assert "unresolved" in result.output

    def test_parse_json(self):
        result = runner.invoke(app, ["parse", "John 3:16; Genesis 51:1", "--output", "json"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload[0] == {"book": "John", "chapter": 3, "start_verse": 16, "end_verse": None}
        assert payload[1]["reason"] == "chapter_out_of_range"

    def test_reshape(self, tmp_path, messy_greek_interlinear):
        source = tmp_path / "analysis.txt"
        source.write_text(messy_greek_interlinear, encoding="utf-8")
        result = runner.invoke(app, ["reshape", str(source)])
        assert result.exit_code == 0
        assert "**2. English Transliteration:**" in result.output
        assert "ἀρχῇ (archee) - beginning" in result.output

    def test_reshape_missing_file(self, tmp_path):
        result = runner.invoke(app, ["reshape", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1

    def test_transliterate(self):
        result = runner.invoke(app, ["transliterate", "logos"])
        assert result.exit_code == 0
        assert "లొగొస్" in result.output
