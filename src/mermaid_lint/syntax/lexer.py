"""Mermaid tokenizer — single pass, longest match first.

Turns raw source text into a flat list of Token objects terminated by one EOF
token. Total: unknown characters become single-codepoint identifiers rather
than errors, so any input produces a token stream.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from mermaid_lint.syntax.tokens import KEYWORDS, Token, TokenKind

# ─── Patterns ────────────────────────────────────────────────────────────────

# A hyphen is not part of an identifier when it starts "->" or "-->".
_IDENTIFIER_RE = re.compile(r"[A-Za-z_](?:[A-Za-z0-9_']|-(?!-?>))*")
_NUMBER_RE = re.compile(r"[0-9]+")

# Arrow operators, longest first.
_ARROW_PATTERNS: list[tuple[str, TokenKind]] = [
    ("-.->>", TokenKind.DOTTED_ARROW),
    ("-.->", TokenKind.DOTTED_ARROW),
    ("-->>", TokenKind.ARROW),
    ("-->", TokenKind.ARROW),
    ("->>", TokenKind.SEQUENCE_ARROW),
    ("->", TokenKind.SEQUENCE_ARROW),
]

_PUNCTUATION: dict[str, TokenKind] = {
    "[": TokenKind.BRACKET_OPEN,
    "]": TokenKind.BRACKET_CLOSE,
    "(": TokenKind.PAREN_OPEN,
    ")": TokenKind.PAREN_CLOSE,
    "{": TokenKind.BRACE_OPEN,
    "}": TokenKind.BRACE_CLOSE,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    ":": TokenKind.COLON,
    "|": TokenKind.PIPE,
}


@dataclass
class Lexer:
    """Stateful scanner over the input string."""

    src: str
    pos: int = 0
    line: int = 1
    column: int = 1
    tokens: list[Token] = field(default_factory=list)

    # ── Primitive helpers ─────────────────────────────────────────────────────

    def eof(self) -> bool:
        return self.pos >= len(self.src)

    def peek(self, s: str) -> bool:
        return self.src.startswith(s, self.pos)

    def char_at(self, offset: int = 0) -> str:
        idx = self.pos + offset
        return self.src[idx] if idx < len(self.src) else ""

    def advance_over(self, text: str) -> None:
        """Move past ``text``, keeping line and column in step."""
        for ch in text:
            if ch == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
        self.pos += len(text)

    def emit(self, kind: TokenKind, text: str) -> None:
        self.tokens.append(Token(kind, text, self.line, self.column, self.pos))
        self.advance_over(text)

    # ── Scanners ──────────────────────────────────────────────────────────────

    def scan_comment(self) -> None:
        end = self.src.find("\n", self.pos)
        end = len(self.src) if end == -1 else end
        self.emit(TokenKind.COMMENT, self.src[self.pos : end])
        # the line break belongs to the comment
        if self.char_at() == "\n":
            self.advance_over("\n")

    def scan_directive(self) -> None:
        depth = 1
        idx = self.pos + 3  # past "%%{"
        while idx < len(self.src) and depth > 0:
            ch = self.src[idx]
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
            idx += 1
        if self.src.startswith("%%", idx):
            idx += 2
        self.emit(TokenKind.DIRECTIVE, self.src[self.pos : idx])

    def scan_string(self) -> None:
        quote = self.src[self.pos]
        close = self.src.find(quote, self.pos + 1)
        end = len(self.src) if close == -1 else close + 1
        self.emit(TokenKind.STRING, self.src[self.pos : end])

    def scan_identifier(self, text: str) -> None:
        self.emit(KEYWORDS.get(text.lower(), TokenKind.IDENTIFIER), text)

    def scan_operator(self) -> bool:
        """Try the multi-character operators. Returns True if one was emitted."""
        if self.peek("(("):
            self.emit(TokenKind.DOUBLE_PAREN_OPEN, "((")
            return True
        if self.peek("))"):
            self.emit(TokenKind.DOUBLE_PAREN_CLOSE, "))")
            return True
        if self.char_at() == "=":
            # "==>>" is deliberately not an arrow: it lexes as "=" and carries on.
            if self.peek("==>") and not self.peek("==>>"):
                self.emit(TokenKind.THICK_ARROW, "==>")
            else:
                self.emit(TokenKind.EQUALS, "=")
            return True
        if self.char_at() in _PUNCTUATION:
            ch = self.char_at()
            self.emit(_PUNCTUATION[ch], ch)
            return True
        for text, kind in _ARROW_PATTERNS:
            if self.peek(text):
                self.emit(kind, text)
                return True
        return False

    def next_token(self) -> None:
        ch = self.char_at()

        if ch.isspace() or ch == "\ufeff":
            self.advance_over(ch)
            return

        if self.peek("%%"):
            if self.char_at(2) == "{":
                self.scan_directive()
            else:
                self.scan_comment()
            return

        if self.scan_operator():
            return

        if ch in ("\"", "'"):
            self.scan_string()
            return

        m = _NUMBER_RE.match(self.src, self.pos)
        if m:
            self.emit(TokenKind.NUMBER, m.group(0))
            return

        m = _IDENTIFIER_RE.match(self.src, self.pos)
        if m:
            self.scan_identifier(m.group(0))
            return

        # Anything else is a one-codepoint identifier (emoji, symbols, ...).
        self.emit(TokenKind.IDENTIFIER, ch)

    def tokenize(self) -> list[Token]:
        while not self.eof():
            self.next_token()
        self.tokens.append(Token(TokenKind.EOF, "", self.line, self.column, self.pos))
        return self.tokens


# ─── Public API ──────────────────────────────────────────────────────────────


def tokenize(src: str) -> list[Token]:
    """Tokenize Mermaid source text. Never raises; always ends with one EOF token."""
    return Lexer(src=src).tokenize()
