"""Sequence diagram parser.

Participants need not be declared: the first message that names one declares
it. Styling statements are rejected here.
"""

from __future__ import annotations

from mermaid_lint.ir.ast import Message, Participant, Sequence
from mermaid_lint.parsers.base import ParseContext
from mermaid_lint.parsers.directives import parse_meta_statement
from mermaid_lint.syntax.tokens import TokenKind
from mermaid_lint.types import ArrowStyle, DiagramType, ErrorCode

_NAME_KINDS = (TokenKind.IDENTIFIER, TokenKind.STRING)
_MESSAGE_ARROWS = frozenset({TokenKind.SEQUENCE_ARROW, TokenKind.ARROW})

# Everything else ("->>", "->", "-->") draws a solid line.
_ARROW_STYLES: dict[str, ArrowStyle] = {
    "-->>": ArrowStyle.Dotted,
}


class SequenceParser:
    """Parser for ``sequenceDiagram``."""

    diagram_type = DiagramType.Sequence

    def __init__(self, ctx: ParseContext) -> None:
        self.ctx = ctx

    def parse(self) -> Sequence:
        ctx = self.ctx
        header = ctx.advance()
        diagram = Sequence(type=DiagramType.Sequence, line=header.line, column=header.column)

        while not ctx.at_end():
            token = ctx.current()
            if token.kind is TokenKind.PARTICIPANT:
                diagram.participants.append(self.parse_participant())
            elif parse_meta_statement(ctx, self.diagram_type):
                continue
            elif token.kind in _NAME_KINDS and self._starts_message():
                diagram.messages.append(self.parse_message())
            else:
                ctx.advance()
        return diagram

    def _starts_message(self) -> bool:
        following = self.ctx.peek()
        return following is not None and following.kind in _MESSAGE_ARROWS

    def parse_participant(self) -> Participant:
        """``participant <name> [as <alias>]``; names and aliases may be quoted."""
        ctx = self.ctx
        start = ctx.advance()
        if not ctx.check(*_NAME_KINDS):
            ctx.error(
                start,
                "Participant declaration must have a name",
                ErrorCode.MISSING_PARTICIPANT_NAME,
                "Add a participant name after the participant keyword",
            )
            return Participant(name="", line=start.line, column=start.column)

        name = ctx.advance().unquoted()
        alias = None
        if ctx.check(TokenKind.IDENTIFIER) and ctx.check_text("as"):
            ctx.advance()
            if ctx.check(*_NAME_KINDS):
                alias = ctx.advance().unquoted()
        return Participant(name=name, line=start.line, column=start.column, alias=alias)

    def parse_message(self) -> Message:
        """``<from> <arrow> <to> [:] text...``; the text runs to the end of the arrow's line."""
        ctx = self.ctx
        sender_token = ctx.advance()
        arrow = ctx.advance()
        arrow_type = _ARROW_STYLES.get(arrow.text, ArrowStyle.Solid)

        if ctx.at_end():
            ctx.error(
                arrow,
                "Incomplete message: arrow must have a destination participant",
                ErrorCode.INCOMPLETE_MESSAGE,
                "Add a destination participant after the arrow",
            )
            return Message(
                sender=sender_token.unquoted(),
                receiver="",
                text="",
                line=sender_token.line,
                column=sender_token.column,
                arrow_type=arrow_type,
            )

        receiver = ctx.advance().unquoted()
        if ctx.check(TokenKind.COLON):
            ctx.advance()

        words: list[str] = []
        while not ctx.at_end() and ctx.current().line == arrow.line:
            words.append(ctx.advance().unquoted())
        return Message(
            sender=sender_token.unquoted(),
            receiver=receiver,
            text=" ".join(words).strip(),
            line=sender_token.line,
            column=sender_token.column,
            arrow_type=arrow_type,
        )
