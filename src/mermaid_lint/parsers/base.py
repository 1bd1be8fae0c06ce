"""Parser protocol and the shared parse context.

The context is the cursor over one token stream plus the diagnostic sink and
per-call counters. Every grammar reports through ``error`` and resynchronises
through ``recover`` instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from mermaid_lint.ir.ast import Diagram
from mermaid_lint.ir.diagnostics import Diagnostic
from mermaid_lint.syntax.tokens import Token, TokenKind
from mermaid_lint.types import ErrorCode


class Located(Protocol):
    """Anything with a source position: a token or an AST node."""

    @property
    def line(self) -> int: ...

    @property
    def column(self) -> int: ...


@dataclass
class ParseContext:
    """Stateful cursor over a token list. Created fresh for every validation call."""

    tokens: list[Token]
    pos: int = 0
    diagnostics: list[Diagnostic] = field(default_factory=list)
    # links seen by the current flowchart; reset when a flowchart starts
    link_count: int = 0

    # ── Cursor ────────────────────────────────────────────────────────────────

    def current(self) -> Token:
        if self.pos >= len(self.tokens):
            return self.tokens[-1]
        return self.tokens[self.pos]

    def peek(self, offset: int = 1) -> Token | None:
        idx = self.pos + offset
        if idx >= len(self.tokens):
            return None
        return self.tokens[idx]

    def advance(self) -> Token:
        """Consume the current token and return it. A no-op at EOF."""
        token = self.current()
        if self.pos < len(self.tokens) and token.kind is not TokenKind.EOF:
            self.pos += 1
        return token

    def at_end(self) -> bool:
        return self.current().kind is TokenKind.EOF

    def check(self, *kinds: TokenKind) -> bool:
        return self.current().kind in kinds

    def check_text(self, *texts: str) -> bool:
        """Exact, case-sensitive match on the current token's text."""
        return self.current().text in texts

    def skip(self, kind: TokenKind) -> None:
        while self.check(kind):
            self.advance()

    # ── Diagnostics ───────────────────────────────────────────────────────────

    def error(
        self,
        where: Located,
        message: str,
        code: ErrorCode = ErrorCode.PARSE_ERROR,
        suggestion: str | None = None,
    ) -> None:
        self.diagnostics.append(Diagnostic(where.line, where.column, message, code, suggestion))

    # ── Recovery ──────────────────────────────────────────────────────────────

    def recover(self, *stop: TokenKind) -> None:
        """Advance until the current token is one of ``stop`` or EOF."""
        while not self.at_end() and not self.check(*stop):
            self.advance()

    def skip_statement(self) -> None:
        """Skip to the statement terminator ``;`` (or EOF) and consume it."""
        self.recover(TokenKind.SEMICOLON)
        if self.check(TokenKind.SEMICOLON):
            self.advance()


class DiagramParser(Protocol):
    """Protocol that every diagram grammar implements.

    The parser is constructed over a context whose cursor sits on the
    diagram's header token, and returns the diagram root.
    """

    def __init__(self, ctx: ParseContext) -> None: ...

    def parse(self) -> Diagram:
        ...
