"""Simple CLI to lex a pseudo-math source file and print tokens."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from .errors import LexerError
from .lexer import Lexer, Token

PROG = "pseudomath-lex"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog=PROG, description="Lex a pseudo-math source file"
    )
    parser.add_argument("path", help="Path to source file, or '-' for stdin")
    parser.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Print progress steps to stderr"
    )
    args = parser.parse_args(argv)
    verbose = args.verbose

    if args.path == "-":
        text = sys.stdin.read()
    else:
        path = Path(args.path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            log_error(f"file not found: {path}")
            return 1
        except UnicodeDecodeError as e:
            log_error(f"not valid UTF-8: {path} ({e.reason} at byte {e.start})")
            return 1
        except OSError as e:
            log_error(f"cannot read {path}: {e.strerror or e}")
            return 1

    if verbose:
        log_step("lexing")
    try:
        tokens = Lexer(text).tokenize()
    except LexerError as e:
        log_error(f"{e} (line {e.line})")
        return 1
    if verbose:
        log_step(f"{len(tokens)} tokens")

    if args.format == "json":
        print(json.dumps([_as_record(t) for t in tokens], indent=2))
    else:
        for t in tokens:
            print(f"{t.kind.name}\t{t.value!r}\t(line {t.line})")
    return 0


def _as_record(token: Token) -> dict:
    return {"type": token.kind.name, "value": token.value}


def log_step(msg: str) -> None:
    print(f"[{PROG}] {msg}...", file=sys.stderr)


def log_error(msg: str) -> None:
    print(f"[{PROG}:error] {msg}", file=sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())
