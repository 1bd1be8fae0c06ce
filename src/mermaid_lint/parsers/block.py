"""Block diagram (``block-beta``) parser: ``columns N`` and flat ``id[label]`` blocks."""

from __future__ import annotations

from mermaid_lint.ir.ast import Block, BlockDiagram
from mermaid_lint.parsers.base import ParseContext
from mermaid_lint.syntax.tokens import TokenKind
from mermaid_lint.types import DiagramType


class BlockParser:
    diagram_type = DiagramType.Block

    def __init__(self, ctx: ParseContext) -> None:
        self.ctx = ctx

    def parse(self) -> BlockDiagram:
        ctx = self.ctx
        header = ctx.advance()
        diagram = BlockDiagram(type=DiagramType.Block, line=header.line, column=header.column)

        while not ctx.at_end():
            if ctx.check_text("columns"):
                ctx.advance()
                if ctx.check(TokenKind.NUMBER):
                    diagram.columns = int(ctx.advance().text)
            elif ctx.check(TokenKind.IDENTIFIER):
                block = self.parse_block()
                if block is not None:
                    diagram.blocks.append(block)
            else:
                ctx.advance()
        return diagram

    def parse_block(self) -> Block | None:
        """``id[label]``. A bare identifier is not a block and yields None."""
        ctx = self.ctx
        id_token = ctx.advance()
        if not ctx.check(TokenKind.BRACKET_OPEN):
            return None
        ctx.advance()

        label = ""
        if ctx.check(TokenKind.STRING):
            label = ctx.advance().unquoted()
        elif ctx.check(TokenKind.IDENTIFIER):
            label = ctx.advance().text
        if ctx.check(TokenKind.BRACKET_CLOSE):
            ctx.advance()
        return Block(id=id_token.text, label=label, line=id_token.line, column=id_token.column)
