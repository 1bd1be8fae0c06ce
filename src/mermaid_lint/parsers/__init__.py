"""Parser registry — one grammar per diagram header token."""

from __future__ import annotations

from mermaid_lint.parsers.base import DiagramParser, ParseContext
from mermaid_lint.parsers.block import BlockParser
from mermaid_lint.parsers.flowchart import FlowchartParser
from mermaid_lint.parsers.generic import ClassDiagramParser, OpaqueParser, StateDiagramParser
from mermaid_lint.parsers.sequence import SequenceParser
from mermaid_lint.parsers.xychart import XYChartParser
from mermaid_lint.syntax.tokens import TokenKind

_PARSERS: dict[TokenKind, type[DiagramParser]] = {
    TokenKind.GRAPH: FlowchartParser,
    TokenKind.FLOWCHART: FlowchartParser,
    TokenKind.SEQUENCE_DIAGRAM: SequenceParser,
    TokenKind.CLASS_DIAGRAM: ClassDiagramParser,
    TokenKind.STATE_DIAGRAM: StateDiagramParser,
    TokenKind.STATE_DIAGRAM_V2: StateDiagramParser,
    TokenKind.ER_DIAGRAM: OpaqueParser,
    TokenKind.JOURNEY: OpaqueParser,
    TokenKind.GANTT: OpaqueParser,
    TokenKind.PIE: OpaqueParser,
    TokenKind.GITGRAPH: OpaqueParser,
    TokenKind.MINDMAP: OpaqueParser,
    TokenKind.TIMELINE: OpaqueParser,
    TokenKind.XYCHART_BETA: XYChartParser,
    TokenKind.BLOCK_BETA: BlockParser,
}


def parser_for(kind: TokenKind) -> type[DiagramParser] | None:
    """The grammar for a header token kind, or None if the token is not a header."""
    return _PARSERS.get(kind)


def registered_headers() -> frozenset[TokenKind]:
    return frozenset(_PARSERS)


__all__ = [
    "DiagramParser",
    "ParseContext",
    "parser_for",
    "registered_headers",
]
