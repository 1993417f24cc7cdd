"""
MindMeld interpreters.

Two execution strategies share the tape semantics defined here:

DirectInterpreter     runs the sanitized character stream and finds the
                      matching bracket by scanning whenever a branch is taken.
TokenizedInterpreter  runs a Token list whose loop brackets already carry
                      their jump distance, so a taken branch is O(1).

For any well-formed program both produce identical output and final tape.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from mindmeld.config import RunConfig
from mindmeld.console import BufferedConsole, Console
from mindmeld.errors import InvalidJump
from mindmeld.instructions import Cursor, Op, Token
from mindmeld.tape import Tape
from mindmeld.tokenizer import check_brackets

logger = logging.getLogger(__name__)

Tracer = Callable[["Interpreter", int, Token], None]


@dataclass
class ExecutionResult:
    output: bytes
    tape: bytes
    cursors: Dict[Cursor, int] = field(default_factory=dict)
    steps: int = 0
    hit_step_limit: bool = False


class Interpreter:
    """State and non-branching operations shared by both strategies."""

    mode = "base"

    def __init__(self, config: Optional[RunConfig] = None, console: Optional[Console] = None,
                 tracer: Optional[Tracer] = None):
        self.config = config or RunConfig()
        self.console = console if console is not None else BufferedConsole()
        self.tracer = tracer
        self.tape = Tape(self.config.tape_size)
        self.output = bytearray()
        self.step_count = 0
        self.hit_step_limit = False

    def reset(self):
        self.tape = Tape(self.config.tape_size)
        self.output = bytearray()
        self.step_count = 0
        self.hit_step_limit = False

    def _emit(self, value: int):
        self.output.append(value)
        self.console.write_byte(value)

    def _apply(self, op: Op, cursor: Cursor):
        if op is Op.INCREMENT:
            self.tape.increment(cursor)
        elif op is Op.DECREMENT:
            self.tape.decrement(cursor)
        elif op is Op.RIGHT:
            self.tape.move(cursor, 1)
        elif op is Op.LEFT:
            self.tape.move(cursor, -1)
        elif op is Op.OUTPUT:
            self._emit(self.tape.read(cursor))
        elif op is Op.INPUT:
            # Typed input is echoed as if the terminal showed it
            self.tape.write(cursor, self.console.read_key())
            self._emit(self.tape.read(cursor))
        else:
            raise ValueError(f"{op} is a branch, not a tape operation")

    def _out_of_steps(self) -> bool:
        limit = self.config.max_steps
        if limit is not None and self.step_count >= limit:
            logger.warning("%s execution stopped after %d steps", self.mode, self.step_count)
            self.hit_step_limit = True
            return True
        return False

    def _result(self) -> ExecutionResult:
        return ExecutionResult(
            output=bytes(self.output),
            tape=self.tape.snapshot(),
            cursors=dict(self.tape.heads),
            steps=self.step_count,
            hit_step_limit=self.hit_step_limit,
        )


class DirectInterpreter(Interpreter):
    mode = "direct"

    def run(self, stream: str) -> ExecutionResult:
        """Execute a sanitized instruction-pair stream."""
        check_brackets(stream)
        self.reset()
        logger.debug("Running %d instructions (direct)", len(stream) // 2)

        ip = 0
        while ip < len(stream):
            if self._out_of_steps():
                break
            op, cursor = Op(stream[ip]), Cursor(stream[ip + 1])
            if self.tracer:
                self.tracer(self, ip // 2, Token(op, cursor))

            if op is Op.LOOP_OPEN:
                if self.tape.read(cursor) == 0:
                    ip = self._scan_forward(stream, ip)
            elif op is Op.LOOP_CLOSE:
                if self.tape.read(cursor) != 0:
                    # Land one pair before '[' so the advance below re-tests it
                    ip = self._scan_backward(stream, ip) - 2
            else:
                self._apply(op, cursor)

            ip += 2
            self.step_count += 1

        return self._result()

    @staticmethod
    def _scan_forward(stream: str, ip: int) -> int:
        level = 1
        while level:
            ip += 2
            if stream[ip] == "[":
                level += 1
            elif stream[ip] == "]":
                level -= 1
        return ip

    @staticmethod
    def _scan_backward(stream: str, ip: int) -> int:
        level = 1
        while level:
            ip -= 2
            if stream[ip] == "[":
                level -= 1
            elif stream[ip] == "]":
                level += 1
        return ip


class TokenizedInterpreter(Interpreter):
    mode = "tokenized"

    def run(self, tokens: List[Token]) -> ExecutionResult:
        """Execute tokens produced by Tokenizer.tokenize."""
        self.reset()
        logger.debug("Running %d instructions (tokenized)", len(tokens))

        ip = 0
        while ip < len(tokens):
            if self._out_of_steps():
                break
            token = tokens[ip]
            if self.tracer:
                self.tracer(self, ip, token)

            if token.op is Op.LOOP_OPEN:
                if self.tape.read(token.cursor) == 0:
                    ip = self._target(token, ip, 1, len(tokens))
            elif token.op is Op.LOOP_CLOSE:
                if self.tape.read(token.cursor) != 0:
                    # Same landing spot as the direct scan: just before '['
                    ip = self._target(token, ip, -1, len(tokens)) - 1
            else:
                self._apply(token.op, token.cursor)

            ip += 1
            self.step_count += 1

        return self._result()

    @staticmethod
    def _target(token: Token, ip: int, direction: int, length: int) -> int:
        """Index of the matching bracket; the jump must stay inside the program."""
        target = ip + direction * token.jump
        if token.jump == 0 or not 0 <= target < length:
            raise InvalidJump(ip, token.jump)
        return target
