from typing import Callable

from mindmeld.errors import SourceUnreadable

PROMPT = "Enter a path to a MindMeld source file: "


def read_source(path: str) -> str:
    """Read a source file as single-byte text."""
    try:
        with open(path, "r", encoding="latin-1") as f:
            return f.read()
    except OSError as e:
        raise SourceUnreadable(path, e.strerror) from e


def prompt_for_path(input_fn: Callable[[str], str] = input) -> str:
    return input_fn(PROMPT).strip()
