"""AST data structures produced by the diagram parsers.

A diagram root (``Diagram`` or one of its subclasses) carries the position of
its header token. Flowcharts are a flat, ordered element list in which an
arrow records only its destination; the source is whatever precedes it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

from mermaid_lint.types import ArrowStyle, DiagramType, NodeShape


def _compact(d: dict[str, Any]) -> dict[str, Any]:
    """Drop unset optional keys."""
    return {k: v for k, v in d.items() if v is not None}


@dataclass
class Diagram:
    type: DiagramType
    line: int
    column: int

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "line": self.line, "column": self.column}


# ─── Flowchart ───────────────────────────────────────────────────────────────


@dataclass
class FlowNode:
    id: str
    line: int
    column: int
    label: str | None = None
    shape: NodeShape = field(default_factory=NodeShape.default)

    type: ClassVar[str] = "node"

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "type": self.type,
                "line": self.line,
                "column": self.column,
                "id": self.id,
                "label": self.label,
                "shape": self.shape.value,
            }
        )


@dataclass
class FlowArrow:
    line: int
    column: int
    to: str | None = None  # None when the arrow ran into end of input
    label: str | None = None

    type: ClassVar[str] = "arrow"

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {"type": self.type, "line": self.line, "column": self.column, "to": self.to, "label": self.label}
        )


@dataclass
class FlowSubgraph:
    id: str
    line: int
    column: int
    children: list[FlowElement] = field(default_factory=list)

    type: ClassVar[str] = "subgraph"

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "line": self.line,
            "column": self.column,
            "id": self.id,
            "children": [c.to_dict() for c in self.children],
        }


FlowElement = Union[FlowNode, FlowArrow, FlowSubgraph]


@dataclass
class Flowchart(Diagram):
    direction: str | None = None
    elements: list[FlowElement] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        if self.direction is not None:
            d["direction"] = self.direction
        d["nodes"] = [e.to_dict() for e in self.elements]
        return d


# ─── Sequence ────────────────────────────────────────────────────────────────


@dataclass
class Participant:
    name: str
    line: int
    column: int
    alias: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {"type": "participant", "line": self.line, "column": self.column, "name": self.name, "alias": self.alias}
        )


@dataclass
class Message:
    sender: str
    receiver: str
    text: str
    line: int
    column: int
    arrow_type: ArrowStyle = ArrowStyle.Solid

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "message",
            "line": self.line,
            "column": self.column,
            "from": self.sender,
            "to": self.receiver,
            "message": self.text,
            "arrowType": self.arrow_type.value,
        }


@dataclass
class Sequence(Diagram):
    participants: list[Participant] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        d["participants"] = [p.to_dict() for p in self.participants]
        d["messages"] = [m.to_dict() for m in self.messages]
        return d


# ─── XY chart ────────────────────────────────────────────────────────────────


@dataclass
class YAxis:
    label: str = ""
    min: int = 0
    max: int = 100


@dataclass
class Series:
    kind: str  # "bar" or "line"
    values: list[int] = field(default_factory=list)


@dataclass
class XYChart(Diagram):
    title: str | None = None
    x_axis: list[str] = field(default_factory=list)
    y_axis: YAxis = field(default_factory=YAxis)
    series: list[Series] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        if self.title is not None:
            d["title"] = self.title
        d["xAxis"] = list(self.x_axis)
        d["yAxis"] = {"label": self.y_axis.label, "min": self.y_axis.min, "max": self.y_axis.max}
        d["data"] = [{"type": s.kind, "values": list(s.values)} for s in self.series]
        return d


# ─── Block diagram ───────────────────────────────────────────────────────────


@dataclass
class Block:
    id: str
    label: str
    line: int
    column: int

    def to_dict(self) -> dict[str, Any]:
        return {"type": "block", "line": self.line, "column": self.column, "id": self.id, "label": self.label}


@dataclass
class BlockDiagram(Diagram):
    columns: int | None = None
    blocks: list[Block] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        if self.columns is not None:
            d["columns"] = self.columns
        d["blocks"] = [b.to_dict() for b in self.blocks]
        return d
