"""Shared type definitions for mermaid-lint.

Enums used across the lexer, parsers, AST and public API.
"""

from __future__ import annotations

from enum import Enum


class DiagramType(str, Enum):
    Flowchart = "flowchart"
    Sequence = "sequence"
    Class = "class"
    State = "state"
    Er = "er"
    Pie = "pie"
    Journey = "journey"
    Gantt = "gantt"
    Gitgraph = "gitgraph"
    Mindmap = "mindmap"
    Timeline = "timeline"
    XYChart = "xychart"
    Block = "block"
    Unknown = "unknown"


class NodeShape(str, Enum):
    Rectangle = "rect"  # id[Label]
    Round = "round"  # id(Label)
    Diamond = "diamond"  # id{Label}
    Circle = "circle"  # id((Label))

    @classmethod
    def default(cls) -> NodeShape:
        return cls.Rectangle


class ArrowStyle(str, Enum):
    Solid = "solid"  # ->> -> -->
    Dotted = "dotted"  # -->>
    Thick = "thick"


class ErrorCode(str, Enum):
    """Stable diagnostic codes. Consumers match on these, never on message text."""

    # input shape
    INVALID_INPUT_TYPE = "INVALID_INPUT_TYPE"
    EMPTY_INPUT = "EMPTY_INPUT"

    # structure
    MISSING_ARROW = "MISSING_ARROW"
    INCOMPLETE_ARROW = "INCOMPLETE_ARROW"
    MISSING_NODE = "MISSING_NODE"
    MISSING_SUBGRAPH_END = "MISSING_SUBGRAPH_END"
    UNMATCHED_END = "UNMATCHED_END"
    MISSING_PARTICIPANT_NAME = "MISSING_PARTICIPANT_NAME"
    INCOMPLETE_MESSAGE = "INCOMPLETE_MESSAGE"

    # diagram type
    UNSUPPORTED_DIAGRAM_TYPE = "UNSUPPORTED_DIAGRAM_TYPE"

    # styling compatibility
    UNSUPPORTED_STYLING_DIRECTIVE = "UNSUPPORTED_STYLING_DIRECTIVE"
    UNSUPPORTED_CLASSDEF_EQUALS_SYNTAX = "UNSUPPORTED_CLASSDEF_EQUALS_SYNTAX"
    INVALID_LINKSTYLE_INDEX = "INVALID_LINKSTYLE_INDEX"
    UNSUPPORTED_TITLE_DIRECTIVE = "UNSUPPORTED_TITLE_DIRECTIVE"
    INVALID_NOTE_SYNTAX = "INVALID_NOTE_SYNTAX"
    INLINE_COMMENT_NOT_SUPPORTED = "INLINE_COMMENT_NOT_SUPPORTED"
    UNSUPPORTED_NODE_SHAPE = "UNSUPPORTED_NODE_SHAPE"

    # charts
    MISSING_DATA = "MISSING_DATA"
    UNSUPPORTED_CHART_TYPE = "UNSUPPORTED_CHART_TYPE"
    UNSUPPORTED_SERIES_SYNTAX = "UNSUPPORTED_SERIES_SYNTAX"
    INVALID_X_AXIS_SYNTAX = "INVALID_X_AXIS_SYNTAX"
    INVALID_Y_AXIS_SYNTAX = "INVALID_Y_AXIS_SYNTAX"
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"

    # compatibility layer
    VERSION_MISMATCH = "VERSION_MISMATCH"

    # catch-all
    PARSE_ERROR = "PARSE_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
