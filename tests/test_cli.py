"""Tests for the html2delta command line."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from html2delta.cli import main


class TestCli:
    """Tests for main()."""

    def test_decodes_file_to_json(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A file argument is decoded and printed as JSON."""
        html_file = tmp_path / "page.html"
        html_file.write_text("<h1>Title</h1><p>Hello <b>World</b></p>", encoding="utf-8")

        exit_code = main([str(html_file)])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["children"][0] == {
            "type": "heading",
            "delta": {"ops": [{"insert": "Title"}]},
            "level": 1,
        }
        assert output["children"][1]["delta"]["ops"] == [
            {"insert": "Hello "},
            {"insert": "World", "attributes": {"bold": True}},
        ]

    def test_reads_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        """Without a file argument, HTML is read from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("<ul><li>a</li></ul>"))

        exit_code = main([])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["children"][0]["type"] == "bulleted_list"

    def test_rich_list_items_flag(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--rich-list-items keeps formatting in list items."""
        html_file = tmp_path / "list.html"
        html_file.write_text("<ol><li><i>x</i></li></ol>", encoding="utf-8")

        main([str(html_file), "--rich-list-items"])

        output = json.loads(capsys.readouterr().out)
        assert output["children"][0]["delta"]["ops"] == [
            {"insert": "x", "attributes": {"italic": True}}
        ]

    def test_stats(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--stats prints tag counts grouped by decoding kind."""
        html_file = tmp_path / "page.html"
        html_file.write_text("<p><b>a</b><b>b</b></p><div>c</div><img src='x'>", encoding="utf-8")

        exit_code = main([str(html_file), "--stats"])

        assert exit_code == 0
        output = capsys.readouterr().out
        assert "Formatting:\n  b: 2" in output
        assert "Block:\n  p: 1" in output
        assert "Ignored:\n  img: 1" in output
        assert "Fallback:\n  div: 1" in output

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A missing input file exits with status 1."""
        exit_code = main([str(tmp_path / "missing.html")])

        assert exit_code == 1
        assert "not found" in capsys.readouterr().err

    def test_invalid_max_depth(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Invalid options are reported instead of raising."""
        html_file = tmp_path / "page.html"
        html_file.write_text("<p>x</p>", encoding="utf-8")

        exit_code = main([str(html_file), "--max-depth", "0"])

        assert exit_code == 1
        assert "max_depth" in capsys.readouterr().err
