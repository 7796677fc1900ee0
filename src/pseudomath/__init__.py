from .errors import LexerError, UnterminatedComment, UnterminatedString
from .lexer import KEYWORDS, Lexer, Token, TokenKind, tokenize
from .scanner import Scanner

__version__ = "0.1.0"

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "Scanner",
    "tokenize",
    "LexerError",
    "UnterminatedString",
    "UnterminatedComment",
]
