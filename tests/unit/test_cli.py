"""Tests for the command-line entry point.

Covers:
- Argument count and usage errors (exit 1)
- Successful conversion (exit 0) and progress output
- Fatal read/decode/config errors (exit 1, message on stderr)
- Standard output mode keeps progress off stdout
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

from vstars2vice import __version__, cli


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    monkeypatch.delenv("VSTARS2VICE_JSON_INDENT", raising=False)
    monkeypatch.delenv("VSTARS2VICE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("VSTARS2VICE_HUGE_TREE", raising=False)


class TestUsage:
    """Exactly two positional arguments are required."""

    @pytest.mark.parametrize("argv", [[], ["only-one.xml"], ["a.xml", "b.json", "c"]])
    def test_wrong_argument_count(
        self, argv: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli.main(argv)

        assert exc_info.value.code == 1
        assert "usage: vstars2vice" in capsys.readouterr().err

    def test_parse_args(self) -> None:
        args = cli.parse_args(["in.xml", "out.json"])
        assert (args.input, args.output) == ("in.xml", "out.json")

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestConversion:
    """Successful runs."""

    def test_exit_zero_and_progress(
        self,
        facility_bundle_xml: Path,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        out = tmp_path / "out.json"

        assert cli.main([str(facility_bundle_xml), str(out)]) == 0

        stdout = capsys.readouterr().out
        assert 'Video map: "PHL RWYS" with 2 line segments' in stdout
        assert 'Video map: "ACY" with 1 line segments' in stdout
        assert sorted(json.loads(out.read_text(encoding="utf-8"))) == ["ACY", "PHL RWYS"]

    def test_stdout_output(
        self,
        video_maps_root_xml: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert cli.main([str(video_maps_root_xml), "-"]) == 0

        captured = capsys.readouterr()
        assert sorted(json.loads(captured.out)) == ["ILG BOUNDARY", "ILG RWYS"]
        assert 'Video map: "ILG RWYS" with 2 line segments' in captured.err

    def test_env_indent(
        self,
        video_maps_root_xml: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("VSTARS2VICE_JSON_INDENT", "1")
        out = tmp_path / "out.json"

        assert cli.main([str(video_maps_root_xml), str(out)]) == 0
        assert out.read_text(encoding="utf-8").splitlines()[1] == ' "ILG BOUNDARY": ['


class TestFatalErrors:
    """Fatal errors print to stderr and exit 1."""

    def test_missing_input(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main([str(tmp_path / "missing.xml"), str(tmp_path / "out.json")]) == 1
        assert "Cannot read facility file" in capsys.readouterr().err

    def test_malformed_xml(
        self, not_xml: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        out = tmp_path / "out.json"
        assert cli.main([str(not_xml), str(out)]) == 1
        assert "not valid XML" in capsys.readouterr().err
        assert not out.exists()

    def test_unwritable_output(
        self,
        facility_bundle_xml: Path,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        out = tmp_path / "no-such-dir" / "out.json"
        assert cli.main([str(facility_bundle_xml), str(out)]) == 1
        assert "Cannot write video map file" in capsys.readouterr().err

    def test_bad_config(
        self,
        facility_bundle_xml: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("VSTARS2VICE_LOG_LEVEL", "LOUD")
        assert cli.main([str(facility_bundle_xml), str(tmp_path / "out.json")]) == 1
        assert "VSTARS2VICE_LOG_LEVEL" in capsys.readouterr().err
