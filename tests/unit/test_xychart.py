"""Tests for the xychart-beta grammar."""

import pytest

from mermaid_lint.ir.ast import Series, XYChart, YAxis
from mermaid_lint.parser import parse
from mermaid_lint.parsers.xychart import needs_quoting

FULL_CHART = """xychart-beta
title "Sales"
x-axis [jan, feb, "Mar 1"]
y-axis "Revenue" 0 --> 100
bar [1, 2, 3]
line [3, 2, 1]
"""


def test_full_chart():
    result = parse(FULL_CHART)
    assert result.is_valid
    assert result.diagram_type == "xychart"
    chart = result.ast
    assert isinstance(chart, XYChart)
    assert chart.title == "Sales"
    assert chart.x_axis == ["jan", "feb", "Mar 1"]
    assert chart.y_axis == YAxis(label="Revenue", min=0, max=100)
    assert chart.series == [Series("bar", [1, 2, 3]), Series("line", [3, 2, 1])]


def test_header_alone_has_no_data():
    result = parse("xychart-beta")
    assert result.codes == ["MISSING_DATA"]
    d = result.diagnostics[0]
    assert (d.line, d.column) == (1, 1)
    assert d.message == "No data provided for chart"


def test_default_y_axis():
    assert parse("xychart-beta\nbar [1]").ast.y_axis == YAxis(label="", min=0, max=100)


def test_x_axis_without_brackets():
    result = parse("xychart-beta\nx-axis jan\nbar [1]")
    assert result.codes == ["INVALID_X_AXIS_SYNTAX"]
    d = result.diagnostics[0]
    assert (d.line, d.column) == (2, 8)


def test_x_axis_title_before_list_rejected():
    result = parse('xychart-beta\nx-axis "Month" [jan, feb]\nbar [1, 2]')
    assert result.codes == ["INVALID_X_AXIS_SYNTAX"]
    d = result.diagnostics[0]
    assert (d.line, d.column) == (2, 8)
    assert result.ast.x_axis == []
    assert result.ast.series[0].values == [1, 2]


def test_x_axis_identifier_needing_quotes():
    result = parse("xychart-beta\nx-axis [Q1's, Q2]\nbar [1, 2]")
    assert result.codes == ["INVALID_IDENTIFIER"]
    d = result.diagnostics[0]
    assert (d.line, d.column) == (2, 9)
    assert d.suggestion == "Use \"Q1's\" instead of Q1's"


def test_y_axis_min_keyword():
    result = parse('xychart-beta\ny-axis "R" min 0\nbar [1]')
    assert result.codes == ["INVALID_Y_AXIS_SYNTAX"]
    d = result.diagnostics[0]
    assert (d.line, d.column) == (2, 12)


@pytest.mark.parametrize("kind", ["area", "scatter"])
def test_unsupported_chart_types(kind):
    result = parse(f"xychart-beta\n{kind} [1, 2]")
    assert result.codes == ["UNSUPPORTED_CHART_TYPE", "MISSING_DATA"]
    assert result.diagnostics[0].message == f"Chart type '{kind}' is not supported by Mermaid CLI"


def test_series_keyword_rejected():
    result = parse('xychart-beta\nseries "a"\nbar [1]')
    assert result.codes == ["UNSUPPORTED_SERIES_SYNTAX"]


def test_unclosed_bracket_list():
    result = parse("xychart-beta\nbar [1, 2")
    assert result.codes == ["PARSE_ERROR"]
    assert result.diagnostics[0].message == "Expected closing bracket ]"
    assert result.ast.series == [Series("bar", [1, 2])]


@pytest.mark.parametrize(
    "label,expected",
    [("jan", False), ("Q1's", True), ("a b", True), ("x/y", True), ("<b>", True), ("Q-1", False)],
)
def test_needs_quoting(label, expected):
    assert needs_quoting(label) is expected
