"""Syntax highlighting for pseudo-math sources, driven by the lexer."""

from __future__ import annotations

from PySide6 import QtGui

from .spans import highlight_spans

LIGHT_COLORS = {
    "keyword": "#0057b7",
    "number": "#b71c1c",
    "string": "#2e7d32",
    "comment": "#9e9e9e",
    "operator": "#6a1b9a",
    "arrow": "#ef6c00",
    "comparison": "#6a1b9a",
    "subscript": "#00838f",
}

DARK_COLORS = {
    "keyword": "#569cd6",
    "number": "#ce9178",
    "string": "#6a9955",
    "comment": "#6a9955",
    "operator": "#c586c0",
    "arrow": "#dcdcaa",
    "comparison": "#c586c0",
    "subscript": "#4ec9b0",
}

IN_COMMENT = 1
IN_DOUBLE_QUOTE = 2
IN_SINGLE_QUOTE = 3

BLOCK_STATES = {"*/": IN_COMMENT, '"': IN_DOUBLE_QUOTE, "'": IN_SINGLE_QUOTE}
OPEN_DELIMITERS = {state: delim for delim, state in BLOCK_STATES.items()}


class PseudoMathHighlighter(QtGui.QSyntaxHighlighter):
    def __init__(self, parent=None, dark: bool = False):
        super().__init__(parent)
        self.formats: dict[str, QtGui.QTextCharFormat] = {}
        self.set_colors(DARK_COLORS if dark else LIGHT_COLORS)

    def set_colors(self, colors: dict[str, str]) -> None:
        """Replace the palette and re-run highlighting."""
        self.formats = {}
        for category, color in colors.items():
            fmt = QtGui.QTextCharFormat()
            fmt.setForeground(QtGui.QColor(color))
            if category == "keyword":
                fmt.setFontWeight(QtGui.QFont.Bold)
            elif category == "comment":
                fmt.setFontItalic(True)
            self.formats[category] = fmt
        self.rehighlight()

    def highlightBlock(self, text: str):
        carry = OPEN_DELIMITERS.get(self.previousBlockState())
        spans, carry = highlight_spans(text, carry)
        for start, length, category in spans:
            fmt = self.formats.get(category)
            if fmt is not None:
                self.setFormat(start, length, fmt)
        self.setCurrentBlockState(BLOCK_STATES.get(carry, 0))
