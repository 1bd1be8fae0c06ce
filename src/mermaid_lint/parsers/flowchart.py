"""Flowchart parser — hand-rolled recursive descent over the token stream.

Builds the flat element list of ``ir.ast`` (nodes, arrows, subgraphs). An
arrow records only its destination; whatever precedes it in the list is its
source. Styling statements are consumed through ``parsers.directives``.
"""

from __future__ import annotations

from dataclasses import dataclass

from mermaid_lint.ir.ast import FlowArrow, Flowchart, FlowElement, FlowNode, FlowSubgraph
from mermaid_lint.parsers.base import ParseContext
from mermaid_lint.parsers.directives import parse_meta_statement
from mermaid_lint.parsers.rules import check_adjacent_nodes, check_inline_comment
from mermaid_lint.syntax.tokens import FLOW_ARROWS, HEADER_TYPES, TokenKind
from mermaid_lint.types import DiagramType, ErrorCode, NodeShape

# ─── Node shapes ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class _ShapeSyntax:
    shape: NodeShape
    close: TokenKind
    missing: str  # message when the closer is absent
    numbers_in_label: bool = False


_SHAPES: dict[TokenKind, _ShapeSyntax] = {
    TokenKind.BRACKET_OPEN: _ShapeSyntax(
        NodeShape.Rectangle, TokenKind.BRACKET_CLOSE, "Expected closing bracket ]", numbers_in_label=True
    ),
    TokenKind.PAREN_OPEN: _ShapeSyntax(NodeShape.Round, TokenKind.PAREN_CLOSE, "Expected closing parenthesis )"),
    TokenKind.DOUBLE_PAREN_OPEN: _ShapeSyntax(
        NodeShape.Circle, TokenKind.DOUBLE_PAREN_CLOSE, "Expected closing double parenthesis ))"
    ),
    TokenKind.BRACE_OPEN: _ShapeSyntax(NodeShape.Diamond, TokenKind.BRACE_CLOSE, "Expected closing brace }"),
}

# Headers that end a flowchart early. Another flowchart header or block-beta
# does not; everything after a foreign header is left unparsed.
_FLOWCHART_HEADERS = frozenset({TokenKind.GRAPH, TokenKind.FLOWCHART})
_FOREIGN_HEADERS = frozenset(
    kind for kind in HEADER_TYPES if kind not in _FLOWCHART_HEADERS and kind is not TokenKind.BLOCK_BETA
)


class FlowchartParser:
    """Parser for ``graph`` / ``flowchart`` diagrams."""

    diagram_type = DiagramType.Flowchart

    def __init__(self, ctx: ParseContext) -> None:
        self.ctx = ctx

    def parse(self) -> Flowchart:
        ctx = self.ctx
        header = ctx.current()
        direction = self.parse_header()
        elements = self.parse_elements()
        check_adjacent_nodes(ctx, elements)
        return Flowchart(
            type=DiagramType.Flowchart,
            line=header.line,
            column=header.column,
            direction=direction,
            elements=elements,
        )

    def parse_header(self) -> str | None:
        """Consume ``graph``/``flowchart`` plus a direction on the same line."""
        ctx = self.ctx
        header = ctx.advance()
        ctx.link_count = 0
        if ctx.check(TokenKind.IDENTIFIER) and ctx.current().line == header.line:
            return ctx.advance().text
        return None

    # ── Elements ─────────────────────────────────────────────────────────────

    def parse_elements(self) -> list[FlowElement]:
        """Element loop for the whole flowchart, up to EOF or a foreign header.

        Open subgraphs live on an explicit stack, so nesting depth is not bound
        by the interpreter's recursion limit. A subgraph is added to its parent
        when opened; its children are checked for adjacency when it closes.
        """
        ctx = self.ctx
        elements: list[FlowElement] = []
        open_subgraphs: list[FlowSubgraph] = []

        while not ctx.at_end() and not ctx.check(*_FOREIGN_HEADERS):
            target = open_subgraphs[-1].children if open_subgraphs else elements
            token = ctx.current()
            if open_subgraphs and _is_end_keyword(token.kind, token.text):
                ctx.advance()
                check_adjacent_nodes(ctx, open_subgraphs.pop().children)
            elif token.kind is TokenKind.SUBGRAPH:
                subgraph = self.parse_subgraph_header()
                target.append(subgraph)
                open_subgraphs.append(subgraph)
            else:
                element = self.parse_element()
                if element is not None:
                    target.append(element)

        # innermost first
        while open_subgraphs:
            ctx.error(
                ctx.current(),
                'Expected "end" to close subgraph',
                ErrorCode.MISSING_SUBGRAPH_END,
                'Add "end" keyword to close the subgraph',
            )
            check_adjacent_nodes(ctx, open_subgraphs.pop().children)
        return elements

    def parse_element(self) -> FlowElement | None:
        """Parse one element. Always consumes at least one token.

        Returns None for statements that produce no element (styling, comments,
        stray punctuation).
        """
        ctx = self.ctx
        token = ctx.current()

        if _is_end_keyword(token.kind, token.text):
            ctx.error(
                token,
                'Unexpected "end" keyword - found end without matching subgraph',
                ErrorCode.UNMATCHED_END,
                "Remove the end keyword or add a corresponding subgraph",
            )
            ctx.advance()
            return None
        if parse_meta_statement(ctx, self.diagram_type):
            return None
        if token.kind is TokenKind.IDENTIFIER:
            return self.parse_node()
        if token.kind in FLOW_ARROWS:
            return self.parse_arrow()
        if token.kind in _FLOWCHART_HEADERS:
            # a second flowchart starts a fresh link count
            self.parse_header()
            return None
        if token.kind is TokenKind.COMMENT:
            check_inline_comment(ctx)
        ctx.advance()
        return None

    def parse_node(self) -> FlowNode:
        """Parse ``id``, ``id[label]``, ``id(label)``, ``id((label))`` or ``id{label}``."""
        ctx = self.ctx
        id_token = ctx.current()
        if ctx.at_end():
            ctx.error(id_token, "Expected node identifier", ErrorCode.MISSING_NODE, "Add a node identifier")
            return FlowNode(id="", line=id_token.line, column=id_token.column)
        ctx.advance()

        syntax = _SHAPES.get(ctx.current().kind)
        if syntax is None:
            return FlowNode(id=id_token.text, line=id_token.line, column=id_token.column)

        ctx.advance()
        label = self.parse_label(syntax.numbers_in_label)
        if ctx.check(syntax.close):
            ctx.advance()
        else:
            ctx.error(ctx.current(), syntax.missing)
            ctx.recover(syntax.close, TokenKind.ARROW, TokenKind.DOTTED_ARROW)
            if ctx.check(syntax.close):
                ctx.advance()
        return FlowNode(
            id=id_token.text,
            line=id_token.line,
            column=id_token.column,
            label=label,
            shape=syntax.shape,
        )

    def parse_label(self, numbers: bool = True) -> str | None:
        """A quoted string, or a run of bare words joined by single spaces."""
        ctx = self.ctx
        if ctx.check(TokenKind.STRING):
            return ctx.advance().unquoted()
        kinds = (TokenKind.IDENTIFIER, TokenKind.NUMBER) if numbers else (TokenKind.IDENTIFIER,)
        words: list[str] = []
        while ctx.check(*kinds):
            words.append(ctx.advance().text)
        return " ".join(words) if words else None

    def parse_arrow(self) -> FlowArrow:
        """Parse ``--> [|label|] dest``. Every arrow counts as a link."""
        ctx = self.ctx
        arrow = ctx.advance()
        ctx.link_count += 1

        label = None
        if ctx.check(TokenKind.PIPE):
            ctx.advance()
            label = self.parse_label()
            if ctx.check(TokenKind.PIPE):
                ctx.advance()
            else:
                ctx.error(ctx.current(), "Expected closing pipe |")

        if ctx.at_end():
            ctx.error(
                arrow,
                "Arrow must have a destination node",
                ErrorCode.INCOMPLETE_ARROW,
                "Add a node after the arrow",
            )
            return FlowArrow(line=arrow.line, column=arrow.column, label=label)

        dest = self.parse_node()
        return FlowArrow(line=arrow.line, column=arrow.column, to=dest.id, label=label)

    def parse_subgraph_header(self) -> FlowSubgraph:
        """Parse ``subgraph id [label]``; children are filled in by ``parse_elements``."""
        ctx = self.ctx
        start = ctx.advance()
        sub_id = ctx.advance().text

        if ctx.check(TokenKind.BRACKET_OPEN):
            ctx.advance()
            self.parse_label()
            if ctx.check(TokenKind.BRACKET_CLOSE):
                ctx.advance()

        return FlowSubgraph(id=sub_id, line=start.line, column=start.column)


def _is_end_keyword(kind: TokenKind, text: str) -> bool:
    return kind is TokenKind.IDENTIFIER and text.lower() == "end"
