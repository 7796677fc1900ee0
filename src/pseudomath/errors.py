"""Lexer errors for the pseudo-math language."""

from __future__ import annotations


class LexerError(Exception):
    """Fatal lexical error; aborts the whole tokenization pass."""

    reason = "lexer error"

    def __init__(self, position: int, start: int | None = None, line: int = 1):
        self.position = position
        self.start = position if start is None else start
        self.line = line
        super().__init__(f"Lexer error at position {position}: {self.reason}")


class UnterminatedString(LexerError):
    reason = "Unterminated string literal"


class UnterminatedComment(LexerError):
    reason = "Unterminated comment"


__all__ = ["LexerError", "UnterminatedString", "UnterminatedComment"]
