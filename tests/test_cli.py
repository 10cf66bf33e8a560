"""Tests for apicodegen.cli module."""

import json

import pytest
from loguru import logger

from apicodegen.cli import main

DESCRIPTION = {
    "types": {"1": {"type": "String"}},
    "entries": {
        "type": "Entries",
        "entries": {"ping": {"type": "Api", "input": {"typeId": 1}, "output": {"typeId": 1}}},
    },
}


@pytest.fixture
def description_file(tmp_path):
    path = tmp_path / "api.json"
    path.write_text(json.dumps(DESCRIPTION), encoding="utf-8")
    return path


class TestMain:
    """Test the command line entry point."""

    def test_stdout(self, description_file, capsys):
        """Test writing generated source to stdout."""
        assert main([str(description_file)]) == 0
        assert capsys.readouterr().out == (
            "export type __API__ = {\n  ping: (input: string) => Promise<string>\n}\n"
        )

    def test_out_file(self, description_file, tmp_path):
        """Test writing generated source to a file, creating parent directories."""
        out = tmp_path / "generated" / "api.ts"
        assert main([str(description_file), "-o", str(out)]) == 0
        assert out.read_text(encoding="utf-8").startswith("export type __API__ = {")

    def test_options(self, description_file, capsys):
        """Test the aggregate name and indent options."""
        assert main([str(description_file), "--api-type-name", "Api", "--indent", "4"]) == 0
        assert capsys.readouterr().out == (
            "export type Api = {\n    ping: (input: string) => Promise<string>\n}\n"
        )

    def test_generation_error(self, tmp_path, capsys):
        """Test that generation failures exit with status 1."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({**DESCRIPTION, "types": {}}), encoding="utf-8")
        assert main([str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Generation failed" in captured.err

    def test_missing_input(self, tmp_path, capsys):
        """Test that an unreadable input exits with status 1."""
        assert main([str(tmp_path / "missing.json")]) == 1
        assert "Cannot read" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "types",
        [
            {"1": {"type": ["String"]}},
            {"1": {"type": "Literal", "value": None}},
            {"1": {"type": "Object", "name": 5, "fields": {}}},
            {"1": {"type": "Object", "fields": {"id": {"typeId": 1, "description": 3}}}},
        ],
    )
    def test_malformed_description(self, tmp_path, capsys, types):
        """Test that wrongly typed values exit with status 1 instead of a traceback."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({**DESCRIPTION, "types": types}), encoding="utf-8")
        assert main([str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Generation failed" in captured.err

    def test_caller_sinks_survive(self, tmp_path):
        """Test that repeated runs keep log sinks added by the embedding application."""
        messages = []
        sink_id = logger.add(messages.append, level="ERROR")
        try:
            missing = str(tmp_path / "missing.json")
            assert main([missing]) == 1
            assert main([missing]) == 1
        finally:
            logger.remove(sink_id)
        assert sum("Cannot read" in message for message in messages) == 2
