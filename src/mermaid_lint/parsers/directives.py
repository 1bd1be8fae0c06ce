"""Styling and meta statements: which diagrams allow them, and how to skip them.

A single static table decides legality. Grammars call ``parse_meta_statement``
on every identifier; a recognised statement is either consumed by its handler
or reported and skipped to its terminator.
"""

from __future__ import annotations

from typing import Callable

from mermaid_lint.parsers.base import ParseContext
from mermaid_lint.syntax.tokens import TokenKind
from mermaid_lint.types import DiagramType, ErrorCode

STYLING_STATEMENTS = ("classDef", "class", "linkStyle", "style", "click", "note")

# Statements each grammar looks at. Diagrams not listed never inspect them.
RECOGNISED_STATEMENTS: dict[DiagramType, frozenset[str]] = {
    DiagramType.Flowchart: frozenset((*STYLING_STATEMENTS, "direction", "title")),
    DiagramType.Sequence: frozenset(STYLING_STATEMENTS),
    DiagramType.Class: frozenset(STYLING_STATEMENTS),
    DiagramType.State: frozenset(STYLING_STATEMENTS),
}

LEGAL_STATEMENTS: dict[DiagramType, frozenset[str]] = {
    DiagramType.Flowchart: frozenset((*STYLING_STATEMENTS, "direction")),
    DiagramType.Sequence: frozenset(),
    DiagramType.Class: frozenset(("classDef", "class")),
    DiagramType.State: frozenset(("classDef", "class")),
}


def is_statement_legal(diagram_type: DiagramType, name: str) -> bool:
    return name in LEGAL_STATEMENTS.get(diagram_type, frozenset())


# ─── Handlers ────────────────────────────────────────────────────────────────


def parse_class_def(ctx: ParseContext, diagram_type: DiagramType) -> None:
    """classDef name prop:value,... ; ``key=value`` properties are rejected."""
    keyword = ctx.advance()
    idx = ctx.pos
    while idx < len(ctx.tokens) and ctx.tokens[idx].kind not in (TokenKind.SEMICOLON, TokenKind.EOF):
        if ctx.tokens[idx].kind is TokenKind.EQUALS:
            ctx.error(
                keyword,
                f"classDef with equals syntax is not supported in {diagram_type.value} diagrams",
                ErrorCode.UNSUPPORTED_CLASSDEF_EQUALS_SYNTAX,
                "Use colon syntax instead (e.g., fill:#f9f instead of fill=lightblue)",
            )
            break
        idx += 1
    ctx.skip_statement()


def parse_class_assignment(ctx: ParseContext, diagram_type: DiagramType) -> None:
    """class <node> <className>."""
    ctx.advance()
    for _ in range(2):
        if ctx.check(TokenKind.IDENTIFIER):
            ctx.advance()
    # class bodies follow in class diagrams, so only the names are consumed there
    if diagram_type is not DiagramType.Class:
        ctx.skip_statement()


def parse_link_style(ctx: ParseContext, diagram_type: DiagramType) -> None:
    """linkStyle <index> ... ; the index must name a link already drawn."""
    keyword = ctx.advance()
    if ctx.check(TokenKind.NUMBER):
        index = int(ctx.advance().text)
        if index >= ctx.link_count:
            ctx.error(
                keyword,
                f"linkStyle index {index} is out of bounds (only {ctx.link_count} link(s) defined)",
                ErrorCode.INVALID_LINKSTYLE_INDEX,
                f"Use a link index between 0 and {max(0, ctx.link_count - 1)}",
            )
    ctx.skip_statement()


def parse_note(ctx: ParseContext, diagram_type: DiagramType) -> None:
    """Flowcharts have no standalone notes; ``note for A`` / ``note A ...`` is an error."""
    ctx.advance()
    following = ctx.peek()
    if following is not None and (following.text == "for" or following.kind is TokenKind.IDENTIFIER):
        ctx.error(
            ctx.current(),
            "Standalone note statements are not supported in flowcharts",
            ErrorCode.INVALID_NOTE_SYNTAX,
            "Use note arrows instead: A -.->|note text| B",
        )
        return
    ctx.skip_statement()


def parse_direction(ctx: ParseContext, diagram_type: DiagramType) -> None:
    ctx.advance()
    if ctx.check(TokenKind.IDENTIFIER):
        ctx.advance()


def skip_title(ctx: ParseContext, diagram_type: DiagramType) -> None:
    keyword = ctx.advance()
    ctx.error(
        keyword,
        "Title directive is not supported in flowcharts",
        ErrorCode.UNSUPPORTED_TITLE_DIRECTIVE,
        "Remove the title directive - flowcharts do not support titles",
    )
    if ctx.check(TokenKind.STRING):
        ctx.advance()
    ctx.skip_statement()


def skip_styling(ctx: ParseContext, diagram_type: DiagramType) -> None:
    ctx.advance()
    ctx.skip_statement()


_HANDLERS: dict[str, Callable[[ParseContext, DiagramType], None]] = {
    "classDef": parse_class_def,
    "class": parse_class_assignment,
    "linkStyle": parse_link_style,
    "style": skip_styling,
    "click": skip_styling,
    "note": parse_note,
    "direction": parse_direction,
}

# Recognised but rejected with a dedicated diagnostic instead of the generic one.
_DEDICATED_REJECTIONS: dict[str, Callable[[ParseContext, DiagramType], None]] = {
    "title": skip_title,
}


def _reject(ctx: ParseContext, diagram_type: DiagramType) -> None:
    token = ctx.current()
    name = diagram_type.value
    legal = LEGAL_STATEMENTS.get(diagram_type, frozenset())
    if legal:
        allowed = " and ".join(s for s in STYLING_STATEMENTS if s in legal)
        suggestion = f"Only {allowed} directives are supported in {name} diagrams"
    else:
        suggestion = f"Styling directives are not supported in {name} diagrams"
    ctx.error(
        token,
        f"{token.text} directive is not supported in {name} diagrams",
        ErrorCode.UNSUPPORTED_STYLING_DIRECTIVE,
        suggestion,
    )
    ctx.skip_statement()


def parse_meta_statement(ctx: ParseContext, diagram_type: DiagramType) -> bool:
    """Consume a styling/meta statement at the cursor, if there is one.

    Returns True when the statement was recognised for ``diagram_type`` (legal
    or not) and has been consumed.
    """
    token = ctx.current()
    if token.kind is not TokenKind.IDENTIFIER:
        return False
    name = token.text
    if name not in RECOGNISED_STATEMENTS.get(diagram_type, frozenset()):
        return False
    if is_statement_legal(diagram_type, name):
        _HANDLERS[name](ctx, diagram_type)
    elif name in _DEDICATED_REJECTIONS:
        _DEDICATED_REJECTIONS[name](ctx, diagram_type)
    else:
        _reject(ctx, diagram_type)
    return True
