"""Tests for the deep-assert command-line entry point."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from deep_assert.cli import EXIT_BAD_INPUT, EXIT_MISMATCH, EXIT_PASS, main


def _write(path: Path, value: Any) -> Path:
    path.write_text(json.dumps(value), encoding="utf-8")
    return path


class TestMain:
    def test_pass(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        expected = _write(tmp_path / "expected.json", {"a": [1, 2]})
        actual = _write(tmp_path / "actual.json", {"a": [1, 2]})
        assert main([str(expected), str(actual), "-m", "snap"]) == EXIT_PASS
        assert capsys.readouterr().out.strip() == "snap: Pass!"

    def test_mismatch(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        expected = _write(tmp_path / "expected.json", {"a": {"b": 1}})
        actual = _write(tmp_path / "actual.json", {"a": {"b": 2}})
        assert main([str(expected), str(actual), "-m", "snap"]) == EXIT_MISMATCH
        assert capsys.readouterr().out.strip() == 'snap: Expected a.b "1" but found "2"'

    def test_message_defaults_to_actual_file_name(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        expected = _write(tmp_path / "expected.json", 1)
        actual = _write(tmp_path / "actual.json", 1)
        main([str(expected), str(actual)])
        assert capsys.readouterr().out.strip() == "actual.json: Pass!"

    def test_type_coercion_flag(self, tmp_path: Path) -> None:
        expected = _write(tmp_path / "expected.json", {"n": "42"})
        actual = _write(tmp_path / "actual.json", {"n": 42})
        assert main([str(expected), str(actual)]) == EXIT_MISMATCH
        assert main([str(expected), str(actual), "--type-coercion"]) == EXIT_PASS

    def test_null_equals_missing_flag(self, tmp_path: Path) -> None:
        expected = _write(tmp_path / "expected.json", {"a": 1, "b": None})
        actual = _write(tmp_path / "actual.json", {"a": 1})
        assert main([str(expected), str(actual), "--null-equals-missing"]) == EXIT_PASS

    def test_cycle_policy_choice(self, tmp_path: Path) -> None:
        expected = _write(tmp_path / "expected.json", [])
        actual = _write(tmp_path / "actual.json", [])
        assert main([str(expected), str(actual), "--cycle-policy", "either_side"]) == EXIT_PASS

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        actual = _write(tmp_path / "actual.json", {})
        code = main([str(tmp_path / "nope.json"), str(actual)])
        assert code == EXIT_BAD_INPUT
        assert "error:" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path: Path) -> None:
        expected = tmp_path / "expected.json"
        expected.write_text("{not json", encoding="utf-8")
        actual = _write(tmp_path / "actual.json", {})
        assert main([str(expected), str(actual)]) == EXIT_BAD_INPUT

    def test_invalid_utf8(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        expected = tmp_path / "expected.json"
        expected.write_bytes(b'{"a": "\xff"}')
        actual = _write(tmp_path / "actual.json", {"a": "x"})
        assert main([str(expected), str(actual)]) == EXIT_BAD_INPUT
        assert "error:" in capsys.readouterr().err

    def test_unknown_cycle_policy_exits(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            main(["a.json", "b.json", "--cycle-policy", "never"])
