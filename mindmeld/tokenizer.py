import logging
from typing import List

from mindmeld.errors import MalformedProgram
from mindmeld.instructions import Cursor, Op, Token

logger = logging.getLogger(__name__)

_OPS = {op.value: op for op in Op}
_CURSORS = {cursor.value: cursor for cursor in Cursor}


def _decode(stream: str, index: int) -> Token:
    op_char, selector = stream[2 * index], stream[2 * index + 1]
    op = _OPS.get(op_char)
    if op is None:
        raise MalformedProgram(f"Unknown operation {op_char!r}", index)
    cursor = _CURSORS.get(selector)
    if cursor is None:
        raise MalformedProgram(f"Unknown selector {selector!r}", index)
    return Token(op, cursor)


def _check_pairs(stream: str):
    if len(stream) % 2:
        raise MalformedProgram(
            f"Instruction stream has odd length {len(stream)}", len(stream) // 2
        )


def check_brackets(stream: str):
    """Raise MalformedProgram unless the stream is made of valid pairs with matched brackets."""
    _check_pairs(stream)
    stack = []
    for i in range(len(stream) // 2):
        op = _decode(stream, i).op
        if op is Op.LOOP_OPEN:
            stack.append(i)
        elif op is Op.LOOP_CLOSE:
            if not stack:
                raise MalformedProgram("Unmatched ']'", i)
            stack.pop()
    if stack:
        raise MalformedProgram("Unmatched '['", stack[-1])


class Tokenizer:
    """Turns an instruction-pair stream into Tokens with resolved loop jumps."""

    def tokenize(self, stream: str) -> List[Token]:
        _check_pairs(stream)
        tokens: List[Token] = []
        stack: List[int] = []

        for i in range(len(stream) // 2):
            token = _decode(stream, i)
            tokens.append(token)
            if token.op is Op.LOOP_OPEN:
                stack.append(i)
            elif token.op is Op.LOOP_CLOSE:
                if not stack:
                    raise MalformedProgram("Unmatched ']'", i)
                start = stack.pop()
                tokens[start].jump = i - start
                token.jump = i - start

        if stack:
            raise MalformedProgram("Unmatched '['", stack[-1])

        logger.debug("Tokenized %d instructions", len(tokens))
        return tokens
