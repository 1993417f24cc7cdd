"""Shared fixtures for MindMeld tests."""

from __future__ import annotations

import os

import pytest

from mindmeld.config import ENV_PREFIX, RunConfig
from mindmeld.console import BufferedConsole
from mindmeld.runner import run_program

# Switch-mode sources (bare operations, a lone A/B switches cursor) with input.
PROGRAMS = {
    "scenario_output_one": ("A+.", b""),
    "hi": ("+" * 8 + "[>" + "+" * 9 + "<-]>." + "+" * 33 + ".", b""),
    "nested_loops": ("++[>++[>+<-]<-]>>.", b""),
    "skipped_loop": ("[+].", b""),
    "echo_input": (",.", b"x"),
    "count_down_input": (",[-.]", b"\x03"),
    "two_cursor_copy": ("+++++ [- B>+>+<< A] B>.>.", b""),
    "mixed_selector_loop": ("B>++ A+++ [ B- A- B]A.B.", b""),
    "close_retests_open": ("B>++ A+ [ A- B]A.B.", b""),
    "wraparound": ("-.B+.", b""),
}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep MINDMELD_* variables from the host out of the tests."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)


@pytest.fixture(params=[False, True], ids=["direct", "tokenized"])
def config(request: pytest.FixtureRequest) -> RunConfig:
    return RunConfig(tokenized=request.param, show_instructions=False, pause_on_exit=False)


@pytest.fixture
def execute(config: RunConfig):
    """Run paired source under the parametrized execution mode."""

    def _execute(source: str, input_data: bytes = b"", **overrides):
        console = BufferedConsole(input_data)
        result = run_program(source, config.merged(**overrides), console)
        return result, console

    return _execute
