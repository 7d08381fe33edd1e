"""Tests for the verlex command-line driver."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from verlex import cli


@pytest.fixture
def constraints(tmp_path: Path) -> Path:
    path = tmp_path / "pins.txt"
    path.write_text("openssl >= 1.0.2, zlib != 1.2 # audited\nlibxml < 2.9\n", encoding="utf-8")
    return path


class TestDefaultOutput:
    """One lexeme per line, EOF omitted."""

    def test_prints_lexemes(self, constraints: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main([str(constraints)]) == cli.EXIT_OK
        out = capsys.readouterr().out
        assert out.splitlines() == [
            "openssl",
            ">=",
            "1.0.2",
            ",",
            "zlib",
            "!=",
            "1.2",
            " audited",
            "libxml",
            "<",
            "2.9",
        ]

    def test_reads_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("a=b"))
        assert cli.main([]) == cli.EXIT_OK
        assert capsys.readouterr().out.splitlines() == ["a", "=", "b"]

    def test_skip_comments(self, constraints: Path, capsys: pytest.CaptureFixture[str]) -> None:
        cli.main(["--skip-comments", str(constraints)])
        assert " audited" not in capsys.readouterr().out.splitlines()


class TestKindsOutput:
    def test_kinds_lines(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("x >= 1"))
        cli.main(["--kinds", "-"])
        assert capsys.readouterr().out.splitlines() == [
            "1:1\tIDENT\tx",
            "1:3\tGREATER_EQUAL\t>=",
            "1:6\tVERSION\t1",
            "1:7\tEOF\t",
        ]


class TestJsonOutput:
    def test_json_array(self, constraints: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["--json", str(constraints)]) == cli.EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data[0] == {"col": 1, "kind": "IDENT", "lineno": 1, "value": "openssl"}
        assert data[-1]["kind"] == "EOF"

    def test_json_and_kinds_are_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            cli.main(["--json", "--kinds"])


class TestExitStatus:
    def test_strict_reports_illegal_token(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "bad.txt"
        path.write_text("pkg = 1.0\n", encoding="utf-8")
        assert cli.main(["--strict", str(path)]) == cli.EXIT_ILLEGAL
        captured = capsys.readouterr()
        assert captured.out.splitlines() == ["pkg"]
        assert captured.err.strip() == f"verlex: {path}:1:5 illegal token '='"

    def test_illegal_tokens_pass_without_strict(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "bad.txt"
        path.write_text("pkg = 1.0\n", encoding="utf-8")
        assert cli.main([str(path)]) == cli.EXIT_OK
        assert capsys.readouterr().out.splitlines() == ["pkg", "=", "1.0"]

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        missing = tmp_path / "nope.txt"
        assert cli.main([str(missing)]) == cli.EXIT_IO
        assert "nope.txt" in capsys.readouterr().err

    def test_worst_status_wins(
        self, tmp_path: Path, constraints: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        missing = tmp_path / "nope.txt"
        assert cli.main([str(missing), str(constraints)]) == cli.EXIT_IO
        assert "openssl" in capsys.readouterr().out

    def test_undecodable_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"pkg >= 1.0 # caf\xe9\n")
        assert cli.main([str(path)]) == cli.EXIT_IO
        assert "read failed" in capsys.readouterr().err
