"""
Pseudo-math language lexer.

Turns indentation-sensitive pseudo-code into a flat list of tokens for the
math-notation renderer. Indentation is tracked with a stack of levels; a level
is the number of leading spaces divided by four, so two spaces give 0.5.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Union

from .errors import LexerError, UnterminatedComment, UnterminatedString
from .scanner import Scanner


class TokenKind(Enum):
    # Layout
    NEWLINE = auto()
    INDENT = auto()
    DEDENT = auto()

    # Literals / identifiers
    COMMENT = auto()
    STRING = auto()
    INTEGER = auto()
    IDENTIFIER = auto()
    KEYWORD = auto()
    SUBSCRIPT = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()
    COMMA = auto()
    ARROW = auto()

    # Arithmetic
    PLUS = auto()
    MINUS = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    POWER = auto()

    COMPARISON = auto()


KEYWORDS = frozenset(
    {
        "function",
        "return",
        "if",
        "then",
        "else",
        "while",
        "for",
        "break",
        "continue",
    }
)

DIGITS = frozenset("0123456789")
LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")

SINGLE_CHAR = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
}

ARITHMETIC = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MULTIPLY,
    "/": TokenKind.DIVIDE,
    "^": TokenKind.POWER,
}

SPACES_PER_LEVEL = 4

Level = Union[int, float]


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: object
    start: int = field(default=0, compare=False)
    end: int = field(default=0, compare=False)
    line: int = field(default=1, compare=False)

    def __repr__(self):
        return f"Token({self.kind.name}, {self.value!r})"


def indent_level(spaces: int) -> Level:
    """Depth for a run of leading spaces; whole levels come back as ``int``."""
    level = spaces / SPACES_PER_LEVEL
    return int(level) if level.is_integer() else level


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.scanner = Scanner(source)
        self.indent_stack: List[Level] = [0]
        self.tokens: List[Token] = []
        self._done = False
        self._error: Optional[LexerError] = None

    def tokenize(self) -> List[Token]:
        if self._error is not None:
            raise self._error
        if self._done:
            return self.tokens
        try:
            self._scan()
        except LexerError as e:
            # A failed pass keeps failing; the partial list is never returned.
            self._error = e
            self.tokens = []
            raise
        self._done = True
        return self.tokens

    def _scan(self) -> None:
        sc = self.scanner
        while not sc.at_end:
            c = sc.current

            if c == "\n":
                self._add(TokenKind.NEWLINE, c, sc.pos, sc.pos + 1)
                sc.advance()
                self._track_indentation()
                continue

            if c in " \t":
                sc.advance()
                continue

            if c == "/" and sc.peek() == "/":
                self._line_comment()
                continue
            if c == "/" and sc.peek() == "*":
                self._block_comment()
                continue

            if c == '"' or c == "'":
                self._string()
                continue

            if c in DIGITS:
                self._integer()
                continue

            if c in LETTERS:
                self._identifier()
                continue

            if c in SINGLE_CHAR:
                self._add(SINGLE_CHAR[c], c, sc.pos, sc.pos + 1)
                sc.advance()
                continue

            if c in "-=" and sc.peek() == ">":
                self._arrow()
                continue

            if c in ARITHMETIC:
                self._add(ARITHMETIC[c], c, sc.pos, sc.pos + 1)
                sc.advance()
                continue

            if c in "=!<>":
                self._comparison()
                continue

            if c == "_":
                self._subscript()
                continue

            # Unrecognized characters are dropped.
            sc.advance()

        while len(self.indent_stack) > 1:
            self.indent_stack.pop()
            self._add(TokenKind.DEDENT, self.indent_stack[-1], sc.pos, sc.pos)

    def _add(
        self,
        kind: TokenKind,
        value: object,
        start: int,
        end: int,
        line: Optional[int] = None,
    ) -> None:
        if line is None:
            line = self.scanner.line
        self.tokens.append(Token(kind, value, start, end, line))

    def _track_indentation(self) -> None:
        sc = self.scanner
        start = sc.pos
        spaces = 0
        while sc.current == " ":
            spaces += 1
            sc.advance()

        level = indent_level(spaces)
        stack = self.indent_stack
        if level > stack[-1]:
            stack.append(level)
            self._add(TokenKind.INDENT, level, sc.pos, sc.pos)
        elif level < stack[-1]:
            # A level between two stack entries is accepted as is.
            while stack[-1] > level:
                stack.pop()
                self._add(TokenKind.DEDENT, stack[-1], start, start)

    def _line_comment(self) -> None:
        sc = self.scanner
        start = sc.pos
        sc.advance()
        sc.advance()
        body = sc.pos
        while sc.current is not None and sc.current != "\n":
            sc.advance()
        self._add(TokenKind.COMMENT, self.source[body : sc.pos], start, sc.pos)

    def _block_comment(self) -> None:
        sc = self.scanner
        start, line = sc.pos, sc.line
        sc.advance()
        sc.advance()
        body = sc.pos
        while sc.current is not None and not (sc.current == "*" and sc.peek() == "/"):
            sc.advance()
        if sc.current is None:
            raise UnterminatedComment(sc.pos, start, line)
        text = self.source[body : sc.pos]
        sc.advance()
        sc.advance()
        self._add(TokenKind.COMMENT, text, start, sc.pos, line)

    def _string(self) -> None:
        sc = self.scanner
        start, line = sc.pos, sc.line
        quote = sc.current
        sc.advance()
        while sc.current is not None and sc.current != quote:
            sc.advance()
        if sc.current is None:
            raise UnterminatedString(sc.pos, start, line)
        text = self.source[start + 1 : sc.pos]
        sc.advance()
        self._add(TokenKind.STRING, text, start, sc.pos, line)

    def _integer(self) -> None:
        sc = self.scanner
        start = sc.pos
        value = 0
        # Folded by hand: int() rejects very long digit strings.
        while sc.current is not None and sc.current in DIGITS:
            value = value * 10 + ord(sc.current) - 48
            sc.advance()
        self._add(TokenKind.INTEGER, value, start, sc.pos)

    def _identifier(self) -> None:
        sc = self.scanner
        start = sc.pos
        while sc.current is not None and sc.current in LETTERS:
            sc.advance()
        text = self.source[start : sc.pos]
        if text in KEYWORDS:
            self._add(TokenKind.KEYWORD, text, start, sc.pos)
        else:
            self._add(TokenKind.IDENTIFIER, text, start, sc.pos)

    def _subscript(self) -> None:
        sc = self.scanner
        start = sc.pos
        sc.advance()  # skip '_'
        body = sc.pos
        while sc.current is not None and (sc.current in LETTERS or sc.current in DIGITS):
            sc.advance()
        self._add(TokenKind.SUBSCRIPT, self.source[body : sc.pos], start, sc.pos)

    def _arrow(self) -> Optional[Token]:
        """Consume ``->`` or ``=>``.

        The first character is consumed before the ``>`` is checked; when
        it is not there, nothing is emitted and that character is lost.
        """
        sc = self.scanner
        start = sc.pos
        first = sc.current
        sc.advance()
        if sc.current != ">":
            return None
        sc.advance()
        self._add(TokenKind.ARROW, first + ">", start, sc.pos)
        return self.tokens[-1]

    def _comparison(self) -> Optional[Token]:
        sc = self.scanner
        start = sc.pos
        c = sc.current
        if c in "<>!" and sc.peek() == "=":
            sc.advance()
            sc.advance()
            self._add(TokenKind.COMPARISON, c + "=", start, sc.pos)
            return self.tokens[-1]
        sc.advance()
        if c == "=":
            self._add(TokenKind.COMPARISON, c, start, sc.pos)
            return self.tokens[-1]
        # lone '<', '>' or '!'
        return None


def tokenize(source: str) -> List[Token]:
    """Tokenize ``source`` with a fresh :class:`Lexer`."""
    return Lexer(source).tokenize()


__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "LexerError",
    "UnterminatedString",
    "UnterminatedComment",
    "KEYWORDS",
    "indent_level",
    "tokenize",
]
