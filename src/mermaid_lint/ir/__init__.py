"""Intermediate representation: AST nodes, diagnostics and results."""

from mermaid_lint.ir.ast import (
    Block,
    BlockDiagram,
    Diagram,
    Flowchart,
    FlowArrow,
    FlowElement,
    FlowNode,
    FlowSubgraph,
    Message,
    Participant,
    Sequence,
    Series,
    XYChart,
    YAxis,
)
from mermaid_lint.ir.diagnostics import Diagnostic, ValidationResult

__all__ = [
    "Block",
    "BlockDiagram",
    "Diagnostic",
    "Diagram",
    "FlowArrow",
    "FlowElement",
    "FlowNode",
    "FlowSubgraph",
    "Flowchart",
    "Message",
    "Participant",
    "Sequence",
    "Series",
    "ValidationResult",
    "XYChart",
    "YAxis",
]
