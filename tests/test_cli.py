"""Tests for the command line interface."""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

from mindmeld.cli import EXIT_FAILED, EXIT_OK, EXIT_UNREADABLE, PAUSE_PROMPT, main
from mindmeld.console import BufferedConsole


def write_program(tmp_path: Path, text: str) -> str:
    path = tmp_path / "program.mm"
    path.write_text(text)
    return str(path)


class TestMain:
    """Tests for mindmeld.cli.main."""

    def test_runs_program(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        console = BufferedConsole()
        code = main([write_program(tmp_path, "+A .A  comment"), "--no-pause"], console=console)

        assert code == EXIT_OK
        assert console.output == b"\x01"
        out = capsys.readouterr().out
        assert out.splitlines()[0] == "+A.A"
        assert PAUSE_PROMPT not in out

    def test_switch_flag(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        console = BufferedConsole()
        code = main([write_program(tmp_path, "A+."), "--switch", "--no-pause"], console=console)

        assert code == EXIT_OK
        assert console.output == b"\x01"
        assert capsys.readouterr().out.splitlines()[0] == "+A.A"

    @pytest.mark.parametrize("flags", [[], ["--tokenize"]])
    def test_modes_agree(self, tmp_path: Path, flags: list) -> None:
        console = BufferedConsole()
        path = write_program(tmp_path, "+A+A+A[A>B+B+B<B-A]A>A.A")
        assert main([path, "--no-pause", *flags], console=console) == EXIT_OK
        assert console.output == b"\x06"

    def test_quiet_instructions(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        main([write_program(tmp_path, "+A"), "--no-pause", "--quiet-instructions"], console=BufferedConsole())
        assert "+A" not in capsys.readouterr().out

    def test_pause_waits_for_key(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        console = BufferedConsole(b"k")
        assert main([write_program(tmp_path, "+A")], console=console) == EXIT_OK
        assert console.input_index == 1
        assert PAUSE_PROMPT in capsys.readouterr().out

    def test_unreadable_source(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        missing = str(tmp_path / "missing.mm")
        code = main([missing, "--no-pause"], console=BufferedConsole())

        assert code == EXIT_UNREADABLE
        assert f"Could not read {missing}" in capsys.readouterr().err

    def test_no_path_and_closed_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO(""))
        code = main(["--no-pause"], console=BufferedConsole())

        assert code == EXIT_UNREADABLE
        assert "No source path given" in capsys.readouterr().err

    def test_no_path_pauses_before_exit(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO(""))
        console = BufferedConsole(b"k")

        assert main([], console=console) == EXIT_UNREADABLE
        assert console.input_index == 1
        assert PAUSE_PROMPT in capsys.readouterr().out

    def test_malformed_program(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        code = main([write_program(tmp_path, "[A+A"), "--no-pause"], console=BufferedConsole())

        assert code == EXIT_FAILED
        assert "Unmatched '['" in capsys.readouterr().err

    def test_cursor_overrun(self, tmp_path: Path) -> None:
        code = main([write_program(tmp_path, "<B"), "--no-pause", "-t"], console=BufferedConsole())
        assert code == EXIT_FAILED

    def test_step_limit_reported(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        code = main([write_program(tmp_path, "+A[A]A"), "--no-pause", "--max-steps", "20"],
                    console=BufferedConsole())

        assert code == EXIT_OK
        assert "Stopped after 20 steps" in capsys.readouterr().err

    def test_config_file_and_flags(self, tmp_path: Path) -> None:
        config = tmp_path / "run.yaml"
        config.write_text("switch_mode: true\npause_on_exit: false\n")
        console = BufferedConsole()

        code = main([write_program(tmp_path, "B>++.A."), "--config", str(config)], console=console)
        assert code == EXIT_OK
        assert console.output == b"\x02\x00"

    def test_environment_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config = tmp_path / "run.yaml"
        config.write_text("max_steps: 1\n")
        monkeypatch.setenv("MINDMELD_MAX_STEPS", "100")
        console = BufferedConsole()

        code = main([write_program(tmp_path, "+A+A.A"), "--config", str(config), "--no-pause"],
                    console=console)
        assert code == EXIT_OK
        assert console.output == b"\x02"

    def test_bad_config(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        config = tmp_path / "run.yaml"
        config.write_text("turbo: true\n")

        code = main([write_program(tmp_path, "+A"), "--config", str(config)], console=BufferedConsole())
        assert code == EXIT_FAILED
        assert "turbo" in capsys.readouterr().err

    def test_trace(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        main([write_program(tmp_path, "+A.A"), "--no-pause", "--trace"], console=BufferedConsole())
        err = capsys.readouterr().err
        assert "Step 1: Execute '+A' at instruction 0" in err
        assert "Step 2: Execute '.A' at instruction 1" in err
