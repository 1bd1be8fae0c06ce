"""Parsers for diagrams whose bodies are not modelled.

Class and state diagrams still enforce which styling statements they allow.
The remaining types (pie, journey, gantt, er, gitgraph, mindmap, timeline)
only recognise the header and consume the rest of the input.
"""

from __future__ import annotations

from mermaid_lint.ir.ast import Diagram
from mermaid_lint.parsers.base import ParseContext
from mermaid_lint.parsers.directives import parse_meta_statement
from mermaid_lint.syntax.tokens import HEADER_TYPES, TokenKind
from mermaid_lint.types import DiagramType, ErrorCode


class OpaqueParser:
    """Recognise the header, consume everything after it."""

    def __init__(self, ctx: ParseContext) -> None:
        self.ctx = ctx

    def parse(self) -> Diagram:
        header = self.ctx.advance()
        self.ctx.recover()
        return Diagram(type=HEADER_TYPES[header.kind], line=header.line, column=header.column)


class StyledBodyParser:
    """Skip the body token by token, checking styling statements as they appear."""

    diagram_type: DiagramType

    def __init__(self, ctx: ParseContext) -> None:
        self.ctx = ctx

    def parse(self) -> Diagram:
        ctx = self.ctx
        header = ctx.advance()
        while not ctx.at_end():
            if parse_meta_statement(ctx, self.diagram_type):
                continue
            self.check_token()
            ctx.advance()
        return Diagram(type=self.diagram_type, line=header.line, column=header.column)

    def check_token(self) -> None:
        """Hook for per-diagram token checks; called before each skipped token."""


class ClassDiagramParser(StyledBodyParser):
    diagram_type = DiagramType.Class

    def check_token(self) -> None:
        ctx = self.ctx
        if ctx.check(TokenKind.DOUBLE_PAREN_OPEN, TokenKind.DOUBLE_PAREN_CLOSE):
            ctx.error(
                ctx.current(),
                "Double-parentheses syntax ((text)) is not supported in class diagrams",
                ErrorCode.UNSUPPORTED_NODE_SHAPE,
                "Use standard class syntax instead",
            )


class StateDiagramParser(StyledBodyParser):
    diagram_type = DiagramType.State
