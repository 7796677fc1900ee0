"""Map lexer tokens of a single line to colored character ranges."""

from __future__ import annotations

from pseudomath.errors import UnterminatedComment, UnterminatedString
from pseudomath.lexer import Lexer, Token, TokenKind

CATEGORIES = {
    TokenKind.KEYWORD: "keyword",
    TokenKind.INTEGER: "number",
    TokenKind.STRING: "string",
    TokenKind.COMMENT: "comment",
    TokenKind.PLUS: "operator",
    TokenKind.MINUS: "operator",
    TokenKind.MULTIPLY: "operator",
    TokenKind.DIVIDE: "operator",
    TokenKind.POWER: "operator",
    TokenKind.ARROW: "arrow",
    TokenKind.COMPARISON: "comparison",
    TokenKind.SUBSCRIPT: "subscript",
}

Span = tuple[int, int, str]


def highlight_spans(
    text: str, carry: str | None = None
) -> tuple[list[Span], str | None]:
    """Return ``(spans, carry)`` for one line of source.

    ``carry`` is the closing delimiter a previous line left open: ``"*/"``
    for a block comment, or the quote character of a string. The returned
    value is the delimiter this line leaves open, or ``None``.
    """
    spans: list[Span] = []
    offset = 0
    if carry is not None:
        category = "comment" if carry == "*/" else "string"
        close = text.find(carry)
        if close == -1:
            if text:
                spans.append((0, len(text), category))
            return spans, carry
        offset = close + len(carry)
        spans.append((0, offset, category))

    tokens, tail, tail_kind = _scan(text[offset:])
    for tok in tokens:
        category = CATEGORIES.get(tok.kind)
        if category is not None and tok.end > tok.start:
            spans.append((offset + tok.start, tok.end - tok.start, category))

    if tail is None:
        return spans, None
    start = offset + tail
    spans.append((start, len(text) - start, tail_kind))
    if tail_kind == "comment":
        return spans, "*/"
    return spans, text[start]


def _scan(text: str) -> tuple[list[Token], int | None, str]:
    """Tokenize ``text``, stopping at the first unterminated construct."""
    end = len(text)
    tail = None
    tail_kind = ""
    while True:
        try:
            return Lexer(text[:end]).tokenize(), tail, tail_kind
        except UnterminatedComment as e:
            end = tail = e.start
            tail_kind = "comment"
        except UnterminatedString as e:
            end = tail = e.start
            tail_kind = "string"
