"""
MindMeld: a two-cursor BrainFuck derivative.

Every instruction is an operation character followed by a selector (A or B)
naming which of the two data cursors it acts on.
"""

from mindmeld.config import RunConfig, load_config
from mindmeld.errors import (
    ConfigError,
    CursorOutOfRange,
    InvalidJump,
    MalformedProgram,
    MindMeldError,
    SourceUnreadable,
)
from mindmeld.instructions import Cursor, Op, Token
from mindmeld.interpreter import DirectInterpreter, ExecutionResult, TokenizedInterpreter
from mindmeld.runner import run_program
from mindmeld.sanitizer import Sanitizer
from mindmeld.tape import Tape
from mindmeld.tokenizer import Tokenizer

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "Cursor",
    "CursorOutOfRange",
    "DirectInterpreter",
    "ExecutionResult",
    "InvalidJump",
    "MalformedProgram",
    "MindMeldError",
    "Op",
    "RunConfig",
    "Sanitizer",
    "SourceUnreadable",
    "Tape",
    "Token",
    "TokenizedInterpreter",
    "Tokenizer",
    "load_config",
    "run_program",
]
