"""
MindMeld Step-by-Step Tracer

Prints each instruction as it is about to execute together with a window of
the tape around the two cursors, e.g.

    Step 3: Execute '-B' at instruction 2
    Memory:   [  1|  0|  0|  0]
    Cursors:     A   B
    Address:     0   1   2   3
"""

import sys
from typing import Optional

from mindmeld.instructions import Cursor, Token


class StepTracer:
    """Tracer callable for Interpreter(tracer=...)."""

    def __init__(self, stream=None, window: int = 10, max_steps: Optional[int] = None):
        self.stream = stream if stream is not None else sys.stderr
        self.window = window
        self.max_steps = max_steps
        self.step_count = 0

    def __call__(self, interpreter, position: int, token: Token):
        self.step_count += 1
        if self.max_steps is not None and self.step_count > self.max_steps:
            return
        tape = interpreter.tape
        cell = tape.read(token.cursor)
        print(f"\nStep {self.step_count}: Execute '{token}' at instruction {position}", file=self.stream)
        print(f"  Cursor {token.cursor.value} at cell {tape.position(token.cursor)} = {cell}", file=self.stream)
        self._show_tape(tape)
        if interpreter.output:
            print(f"Output:   {list(interpreter.output)}", file=self.stream)

    def _show_tape(self, tape):
        a, b = tape.position(Cursor.A), tape.position(Cursor.B)

        # Focus on both cursors if they fit, otherwise on A
        low, high = min(a, b), max(a, b)
        if high - low < self.window:
            start = low - (self.window - (high - low)) // 2
        else:
            start = a - self.window // 2
        start = max(0, min(start, len(tape) - self.window))
        end = min(len(tape), start + self.window)

        memory_vals = []
        memory_ptrs = []
        memory_addrs = []
        for i, value in enumerate(tape.window(start, end), start):
            marker = ("A" if i == a else "") + ("B" if i == b else "")
            memory_vals.append(f"{value:3d}")
            memory_ptrs.append(f"{marker:>3}")
            memory_addrs.append(f"{i:3d}")

        print("Memory:   [" + "|".join(memory_vals) + "]", file=self.stream)
        print("Cursors:   " + " ".join(memory_ptrs), file=self.stream)
        print("Address:   " + " ".join(memory_addrs), file=self.stream)
