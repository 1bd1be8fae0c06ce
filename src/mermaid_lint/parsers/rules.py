"""Semantic checks that run beside the grammars.

``check_adjacent_nodes`` is the post-pass over a built flowchart element list;
``check_inline_comment`` runs as each comment token is skipped.
"""

from __future__ import annotations

from mermaid_lint.ir.ast import FlowElement, FlowNode
from mermaid_lint.parsers.base import ParseContext
from mermaid_lint.syntax.tokens import TokenKind
from mermaid_lint.types import ErrorCode


def check_adjacent_nodes(ctx: ParseContext, elements: list[FlowElement]) -> None:
    """Flag two consecutive nodes on one source line with no arrow between them.

    This is a line-adjacency check over the flat list, not a reachability check:
    nodes on separate lines are never compared.
    """
    for prev, node in zip(elements, elements[1:]):
        if isinstance(prev, FlowNode) and isinstance(node, FlowNode) and prev.line == node.line:
            ctx.error(
                node,
                f"Adjacent nodes '{prev.id}' and '{node.id}' on same line without arrow connection",
                ErrorCode.MISSING_ARROW,
                "Add an arrow (-->) between the nodes or place them on separate lines",
            )


def is_inline_comment(ctx: ParseContext) -> bool:
    """True when the comment at the cursor follows another token on its line."""
    token = ctx.current()
    if token.kind is not TokenKind.COMMENT or ctx.pos == 0:
        return False
    return ctx.tokens[ctx.pos - 1].line == token.line


def check_inline_comment(ctx: ParseContext) -> None:
    if is_inline_comment(ctx):
        ctx.error(
            ctx.current(),
            "Inline comments are not supported",
            ErrorCode.INLINE_COMMENT_NOT_SUPPORTED,
            "Move comment to its own line",
        )
