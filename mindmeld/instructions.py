"""
Instruction model.

    +A  +B   Increment the cell under cursor A / B
    -A  -B   Decrement the cell under cursor A / B
    >A  >B   Move cursor A / B right
    <A  <B   Move cursor A / B left
    .A  .B   Output the cell under cursor A / B
    ,A  ,B   Read one key into the cell under cursor A / B
    [A  [B   Jump past the matching close bracket if the cell is 0
    ]A  ]B   Jump back to the matching open bracket if the cell is not 0

A bracket pair may select different cursors; each bracket tests its own.
"""

from dataclasses import dataclass
from enum import Enum

OPERATIONS = "+-<>.,[]"
SELECTORS = "AB"


class Op(Enum):
    INCREMENT = "+"
    DECREMENT = "-"
    LEFT = "<"
    RIGHT = ">"
    INPUT = ","
    OUTPUT = "."
    LOOP_OPEN = "["
    LOOP_CLOSE = "]"


class Cursor(Enum):
    A = "A"
    B = "B"


@dataclass
class Token:
    op: Op
    cursor: Cursor
    # Distance to the matching bracket in instructions; 0 means unresolved.
    jump: int = 0

    def __str__(self):
        return f"{self.op.value}{self.cursor.value}"
