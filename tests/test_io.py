"""Tests for JSONL helpers."""

import json
from pathlib import Path

import pytest

from form_object import ProcessingResult
from form_object.io import read_jsonl, write_jsonl


class TestReadJsonl:
    """Tests for read_jsonl()."""

    def test_reads_records_skipping_blank_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "in.jsonl"
        path.write_text('{"form": {"name": "A"}}\n\n{"form": {}}\n')

        assert list(read_jsonl(path)) == [{"form": {"name": "A"}}, {"form": {}}]

    def test_invalid_json_reports_line(self, tmp_path: Path) -> None:
        path = tmp_path / "in.jsonl"
        path.write_text('{"form": {}}\n{oops\n')

        with pytest.raises(ValueError, match="line 2"):
            list(read_jsonl(path))

    def test_non_object_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "in.jsonl"
        path.write_text("[1, 2]\n")

        with pytest.raises(ValueError, match="Expected a JSON object on line 1"):
            list(read_jsonl(path))

    def test_error_handler_skips_bad_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "in.jsonl"
        path.write_text('{"form": {"name": "A"}}\n{oops\n"text"\n{"form": {}}\n')
        reported: list[tuple[int, str]] = []

        records = list(read_jsonl(path, on_error=lambda n, msg: reported.append((n, msg))))

        assert records == [{"form": {"name": "A"}}, {"form": {}}]
        assert [n for n, _ in reported] == [2, 3]
        assert reported[0][1].startswith("Invalid JSON on line 2")
        assert reported[1][1] == "Expected a JSON object on line 3, got str"


class TestWriteJsonl:
    """Tests for write_jsonl()."""

    def test_writes_models_and_dicts(self, tmp_path: Path) -> None:
        path = tmp_path / "out.jsonl"
        count = write_jsonl(
            path,
            [ProcessingResult(model_name="form", valid=True), {"plain": 1}],
        )

        lines = path.read_text().splitlines()
        assert count == 2
        assert json.loads(lines[0])["model_name"] == "form"
        assert json.loads(lines[1]) == {"plain": 1}
