"""Character cursor over an in-memory source buffer."""

from __future__ import annotations

from typing import Optional


class Scanner:
    """Single cursor with one character of lookahead.

    ``current`` is ``None`` once the cursor reaches the end of the input;
    advancing from there is a no-op.
    """

    def __init__(self, source: str):
        self.source = source
        self.length = len(source)
        self.pos = 0
        self.line = 1
        self.current: Optional[str] = source[0] if source else None

    @property
    def at_end(self) -> bool:
        return self.current is None

    def peek(self) -> Optional[str]:
        nxt = self.pos + 1
        if nxt >= self.length:
            return None
        return self.source[nxt]

    def advance(self) -> None:
        if self.current is None:
            return
        if self.current == "\n":
            self.line += 1
        self.pos += 1
        self.current = self.source[self.pos] if self.pos < self.length else None


__all__ = ["Scanner"]
