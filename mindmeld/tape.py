from typing import Dict

import numpy as np

from mindmeld.config import TAPE_SIZE
from mindmeld.errors import CursorOutOfRange
from mindmeld.instructions import Cursor


class Tape:
    """Fixed-size byte tape with two independent cursors.

    Cells are unsigned 8-bit and wrap modulo 256. Cursors start at cell 0,
    may point at the same cell, and are never allowed to leave the tape:
    a move past either end raises CursorOutOfRange and the cursor stays put.
    """

    def __init__(self, size=TAPE_SIZE):
        self.cells = np.zeros(size, dtype=np.uint8)
        self.heads: Dict[Cursor, int] = {Cursor.A: 0, Cursor.B: 0}

    def __len__(self):
        return len(self.cells)

    def position(self, cursor: Cursor) -> int:
        return self.heads[cursor]

    def read(self, cursor: Cursor) -> int:
        return int(self.cells[self.heads[cursor]])

    def write(self, cursor: Cursor, value: int):
        self.cells[self.heads[cursor]] = value % 256

    def increment(self, cursor: Cursor):
        self.write(cursor, self.read(cursor) + 1)

    def decrement(self, cursor: Cursor):
        self.write(cursor, self.read(cursor) - 1)

    def move(self, cursor: Cursor, delta: int):
        target = self.heads[cursor] + delta
        if not 0 <= target < len(self.cells):
            raise CursorOutOfRange(cursor, target, len(self.cells))
        self.heads[cursor] = target

    def snapshot(self) -> bytes:
        return self.cells.tobytes()

    def window(self, start: int, stop: int):
        """Cell values in [start, stop), clipped to the tape."""
        start = max(0, start)
        stop = min(len(self.cells), stop)
        return [int(v) for v in self.cells[start:stop]]
