"""Token vocabulary for the Mermaid lexer.

Defines the closed set of token kinds, the keyword table and the Token
dataclass shared by the lexer and every diagram parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from mermaid_lint.types import DiagramType


class TokenKind(Enum):
    # Diagram headers
    GRAPH = auto()  # graph
    FLOWCHART = auto()  # flowchart
    SEQUENCE_DIAGRAM = auto()  # sequenceDiagram
    CLASS_DIAGRAM = auto()  # classDiagram
    STATE_DIAGRAM = auto()  # stateDiagram
    STATE_DIAGRAM_V2 = auto()  # stateDiagram-v2
    ER_DIAGRAM = auto()  # erDiagram
    JOURNEY = auto()  # journey
    GANTT = auto()  # gantt
    PIE = auto()  # pie
    GITGRAPH = auto()  # gitgraph
    MINDMAP = auto()  # mindmap
    TIMELINE = auto()  # timeline
    XYCHART_BETA = auto()  # xychart-beta
    BLOCK_BETA = auto()  # block-beta

    # Other keywords
    SUBGRAPH = auto()  # subgraph
    PARTICIPANT = auto()  # participant
    ACTIVATE = auto()  # activate
    DEACTIVATE = auto()  # deactivate

    # Arrows
    ARROW = auto()  # --> -->>
    DOTTED_ARROW = auto()  # -.-> -.->>
    THICK_ARROW = auto()  # ==>
    SEQUENCE_ARROW = auto()  # -> ->>

    # Punctuation
    BRACKET_OPEN = auto()  # [
    BRACKET_CLOSE = auto()  # ]
    PAREN_OPEN = auto()  # (
    PAREN_CLOSE = auto()  # )
    DOUBLE_PAREN_OPEN = auto()  # ((
    DOUBLE_PAREN_CLOSE = auto()  # ))
    BRACE_OPEN = auto()  # {
    BRACE_CLOSE = auto()  # }
    PIPE = auto()  # |
    COLON = auto()  # :
    COMMA = auto()  # ,
    SEMICOLON = auto()  # ;
    EQUALS = auto()  # =

    # Literals
    IDENTIFIER = auto()
    STRING = auto()  # "..." or '...'
    NUMBER = auto()  # digit run

    # Special
    COMMENT = auto()  # %% ...
    DIRECTIVE = auto()  # %%{ ... }%%
    EOF = auto()


# Matched case-insensitively; tokens keep the source casing.
KEYWORDS: dict[str, TokenKind] = {
    "graph": TokenKind.GRAPH,
    "flowchart": TokenKind.FLOWCHART,
    "sequencediagram": TokenKind.SEQUENCE_DIAGRAM,
    "classdiagram": TokenKind.CLASS_DIAGRAM,
    "statediagram": TokenKind.STATE_DIAGRAM,
    "statediagram-v2": TokenKind.STATE_DIAGRAM_V2,
    "erdiagram": TokenKind.ER_DIAGRAM,
    "journey": TokenKind.JOURNEY,
    "gantt": TokenKind.GANTT,
    "pie": TokenKind.PIE,
    "gitgraph": TokenKind.GITGRAPH,
    "mindmap": TokenKind.MINDMAP,
    "timeline": TokenKind.TIMELINE,
    "xychart-beta": TokenKind.XYCHART_BETA,
    "block-beta": TokenKind.BLOCK_BETA,
    "subgraph": TokenKind.SUBGRAPH,
    "participant": TokenKind.PARTICIPANT,
    "activate": TokenKind.ACTIVATE,
    "deactivate": TokenKind.DEACTIVATE,
}

HEADER_TYPES: dict[TokenKind, DiagramType] = {
    TokenKind.GRAPH: DiagramType.Flowchart,
    TokenKind.FLOWCHART: DiagramType.Flowchart,
    TokenKind.SEQUENCE_DIAGRAM: DiagramType.Sequence,
    TokenKind.CLASS_DIAGRAM: DiagramType.Class,
    TokenKind.STATE_DIAGRAM: DiagramType.State,
    TokenKind.STATE_DIAGRAM_V2: DiagramType.State,
    TokenKind.ER_DIAGRAM: DiagramType.Er,
    TokenKind.JOURNEY: DiagramType.Journey,
    TokenKind.GANTT: DiagramType.Gantt,
    TokenKind.PIE: DiagramType.Pie,
    TokenKind.GITGRAPH: DiagramType.Gitgraph,
    TokenKind.MINDMAP: DiagramType.Mindmap,
    TokenKind.TIMELINE: DiagramType.Timeline,
    TokenKind.XYCHART_BETA: DiagramType.XYChart,
    TokenKind.BLOCK_BETA: DiagramType.Block,
}

FLOW_ARROWS = frozenset({TokenKind.ARROW, TokenKind.DOTTED_ARROW, TokenKind.THICK_ARROW})


@dataclass(frozen=True)
class Token:
    """One lexical unit. Positions refer to the token's first character."""

    kind: TokenKind
    text: str
    line: int  # 1-based
    column: int  # 1-based
    offset: int  # 0-based

    def unquoted(self) -> str:
        """Text without its surrounding quotes (string tokens only)."""
        if self.kind is not TokenKind.STRING:
            return self.text
        # an unterminated string runs to end of input without a closing quote
        if len(self.text) >= 2 and self.text.endswith(self.text[0]):
            return self.text[1:-1]
        return self.text[1:]

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, L{self.line}:{self.column})"
