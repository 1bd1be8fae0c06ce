"""Tests for header dispatch, block diagrams and the header-only diagram types."""

import pytest

from mermaid_lint.ir.ast import Block, BlockDiagram, Diagram
from mermaid_lint.parser import parse
from mermaid_lint.parsers import parser_for, registered_headers
from mermaid_lint.syntax.tokens import HEADER_TYPES, TokenKind
from mermaid_lint.types import DiagramType

# ─── Dispatch ────────────────────────────────────────────────────────────────


def test_every_header_has_a_parser():
    assert registered_headers() == frozenset(HEADER_TYPES)


def test_non_header_has_no_parser():
    assert parser_for(TokenKind.IDENTIFIER) is None


def test_unknown_diagram_type():
    result = parse("hello world")
    assert result.codes == ["UNSUPPORTED_DIAGRAM_TYPE"]
    assert result.diagram_type == "unknown"
    assert result.diagnostics[0].message == "Unsupported diagram type: hello"
    assert result.ast == Diagram(type=DiagramType.Unknown, line=1, column=1)


def test_leading_directives_are_skipped():
    result = parse('%%{init: {"theme": "dark"}}%%\n%%{wrap}%%\nflowchart TD\nA --> B')
    assert result.is_valid
    assert result.diagram_type == "flowchart"
    assert (result.ast.line, result.ast.column) == (3, 1)


def test_leading_comment_is_not_skipped():
    result = parse("%% title\nflowchart TD\nA --> B")
    assert result.codes == ["UNSUPPORTED_DIAGRAM_TYPE"]


# ─── Header-only diagrams ────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "src,diagram_type",
    [
        ('pie title Pets\n"Dogs" : 386\n"Cats" : 85', "pie"),
        ("journey\ntitle My day\nsection Go to work\nMake tea: 5: Me", "journey"),
        ("gantt\ntitle A Gantt\nsection S\nTask :a1, 2014-01-01, 30d", "gantt"),
        ("erDiagram\nCUSTOMER ||--o{ ORDER : places", "er"),
        ("gitGraph\ncommit\nbranch develop\ncheckout develop\ncommit", "gitgraph"),
        ("mindmap\nroot((mindmap))\n  Origins", "mindmap"),
        ("timeline\ntitle History\n2002 : LinkedIn", "timeline"),
        ("classDiagram\nAnimal <|-- Duck\nclass Duck{\n+swim()\n}", "class"),
        ("stateDiagram\n[*] --> Still\nStill --> [*]", "state"),
        ("stateDiagram-v2\n[*] --> Moving", "state"),
    ],
)
def test_header_only_diagrams(src, diagram_type):
    result = parse(src)
    assert result.is_valid, result.diagnostics
    assert result.diagram_type == diagram_type
    assert result.ast.type.value == diagram_type


def test_class_diagram_rejects_double_parens():
    result = parse("classDiagram\nA((x))")
    assert result.codes == ["UNSUPPORTED_NODE_SHAPE", "UNSUPPORTED_NODE_SHAPE"]
    assert [(d.line, d.column) for d in result.diagnostics] == [(2, 2), (2, 5)]


def test_class_keyword_skips_names_only():
    assert parse("classDiagram\nclass Animal\nclass Duck {\n+swim()\n}").is_valid


# ─── Block diagrams ──────────────────────────────────────────────────────────


def test_block_diagram():
    result = parse('block-beta\ncolumns 3\nA["Block A"] B[Second]')
    assert result.is_valid
    diagram = result.ast
    assert isinstance(diagram, BlockDiagram)
    assert diagram.columns == 3
    assert diagram.blocks == [
        Block(id="A", label="Block A", line=3, column=1),
        Block(id="B", label="Second", line=3, column=14),
    ]


def test_block_bare_identifier_ignored():
    diagram = parse("block-beta\nA\nB[x]").ast
    assert [b.id for b in diagram.blocks] == ["B"]


def test_block_diagram_without_columns():
    diagram = parse("block-beta\nA[x]").ast
    assert diagram.columns is None
