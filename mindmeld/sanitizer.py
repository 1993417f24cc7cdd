"""
Source sanitization.

Both modes reduce raw source text to a stream of instruction pairs: an even
number of characters where every even index is an operation and every odd
index is a selector. Anything outside the alphabet is a comment.

Paired mode (default) expects the selector written after each operation:

    +A +A [A -A >B +B <B ]A

Switch mode expects bare operations; a standalone A or B switches the
selector used for everything that follows (A until the first switch):

    ++[- B>+< A]
"""

import logging
from typing import Optional

from mindmeld.config import RunConfig
from mindmeld.instructions import OPERATIONS, SELECTORS

logger = logging.getLogger(__name__)


def sanitize_paired(source: str) -> str:
    out = []
    pending = None
    for c in source:
        if c in OPERATIONS:
            # An operation still waiting for its selector is superseded
            pending = c
        elif c in SELECTORS and pending is not None:
            out.append(pending + c)
            pending = None
        # Repeated selectors and selectors with no operation fall through
    return "".join(out)


def sanitize_switch(source: str) -> str:
    out = []
    current = "A"
    for c in source:
        if c in SELECTORS:
            current = c
        elif c in OPERATIONS:
            out.append(c + current)
    return "".join(out)


class Sanitizer:
    def __init__(self, config: Optional[RunConfig] = None):
        self.config = config or RunConfig()

    def sanitize(self, source: str) -> str:
        if self.config.switch_mode:
            stream = sanitize_switch(source)
        else:
            stream = sanitize_paired(source)
        logger.debug(
            "Sanitized %d chars to %d instructions (%s mode, %d chars dropped)",
            len(source), len(stream) // 2,
            "switch" if self.config.switch_mode else "paired",
            max(0, len(source) - len(stream)),
        )
        return stream
