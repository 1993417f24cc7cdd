"""Exceptions raised by the MindMeld interpreter."""

from typing import Optional


class MindMeldError(Exception):
    """Base class for every interpreter failure."""


class SourceUnreadable(MindMeldError):
    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"Could not read {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class MalformedProgram(MindMeldError):
    """Unbalanced brackets or a stream that is not made of instruction pairs."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.position = position
        if position is not None:
            message = f"{message} at instruction {position}"
        super().__init__(message)


class CursorOutOfRange(MindMeldError):
    def __init__(self, cursor, position: int, size: int):
        self.cursor = cursor
        self.position = position
        self.size = size
        super().__init__(
            f"Cursor {cursor.value} moved to {position}, outside the tape [0, {size})"
        )


class InvalidJump(MindMeldError):
    """A taken branch had jump distance 0 or a target outside the program."""

    def __init__(self, position: int, jump: int = 0):
        self.position = position
        self.jump = jump
        super().__init__(f"Taken branch with invalid jump distance {jump} at instruction {position}")


class ConfigError(MindMeldError):
    pass
