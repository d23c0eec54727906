"""
Scratch buffer used while cleaning a path.

The buffer starts out borrowing the original path: as long as every character
written equals the character already at that position in the input, only the
write cursor moves. The first write that differs allocates an owned list the
size of the input and copies the already-written prefix into it.
"""

import logging
from typing import List

logger = logging.getLogger(__name__)


class LazyBuffer:
    """Write cursor over either the borrowed input or an owned character list."""

    __slots__ = ('path', 'owned', 'buf', 'w')

    def __init__(self, path: str):
        self.path = path
        self.owned = False
        self.buf: List[str] = []
        self.w = 0

    def index(self, i: int) -> str:
        """Return the character already written at position ``i``."""
        if self.owned:
            return self.buf[i]
        return self.path[i]

    def append(self, c: str) -> None:
        """
        Write one character at the cursor and advance it.

        Args:
            c: Character to write
        """
        if not self.owned:
            if self.w < len(self.path) and self.path[self.w] == c:
                self.w += 1
                return
            logger.debug("Output diverges from %r at %d, allocating buffer", self.path, self.w)
            # Never needs more than the input length.
            self.buf = list(self.path[:self.w]) + [''] * (len(self.path) - self.w)
            self.owned = True
        self.buf[self.w] = c
        self.w += 1

    def string(self) -> str:
        """Return everything written so far."""
        if not self.owned:
            return self.path[:self.w]
        return ''.join(self.buf[:self.w])
