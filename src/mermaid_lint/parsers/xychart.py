"""XY chart (``xychart-beta``) parser.

Recognises title, x-axis, y-axis and bar/line series. Chart kinds the
renderer lacks (area, scatter, named series) are reported, not parsed.
"""

from __future__ import annotations

import re
from typing import Iterator

from mermaid_lint.ir.ast import Series, XYChart, YAxis
from mermaid_lint.parsers.base import ParseContext
from mermaid_lint.syntax.tokens import Token, TokenKind
from mermaid_lint.types import DiagramType, ErrorCode

# Characters that force an axis label to be quoted.
_NEEDS_QUOTING_RE = re.compile(r"['\"&<>(){}\[\]|\\/\s]")

_SERIES_KINDS = ("bar", "line")
_UNSUPPORTED_KINDS = ("area", "scatter")


def needs_quoting(label: str) -> bool:
    return _NEEDS_QUOTING_RE.search(label) is not None


class XYChartParser:
    """Parser for ``xychart-beta``."""

    diagram_type = DiagramType.XYChart

    def __init__(self, ctx: ParseContext) -> None:
        self.ctx = ctx

    def parse(self) -> XYChart:
        ctx = self.ctx
        header = ctx.advance()
        chart = XYChart(type=DiagramType.XYChart, line=header.line, column=header.column)

        while not ctx.at_end():
            token = ctx.current()
            if ctx.check_text("title"):
                ctx.advance()
                if ctx.check(TokenKind.STRING):
                    chart.title = ctx.advance().unquoted()
            elif ctx.check_text("x-axis"):
                self.parse_x_axis(chart)
            elif ctx.check_text("y-axis"):
                self.parse_y_axis(chart)
            elif ctx.check_text(*_SERIES_KINDS):
                self.parse_series(chart)
            elif ctx.check_text(*_UNSUPPORTED_KINDS):
                ctx.error(
                    token,
                    f"Chart type '{token.text}' is not supported by Mermaid CLI",
                    ErrorCode.UNSUPPORTED_CHART_TYPE,
                    "Use bar or line chart types instead",
                )
                ctx.advance()
            elif ctx.check_text("series"):
                ctx.error(
                    token,
                    "'series' syntax is not supported by Mermaid CLI",
                    ErrorCode.UNSUPPORTED_SERIES_SYNTAX,
                    'Use bar or line directly instead of series "name" type chart',
                )
                ctx.advance()
            else:
                ctx.advance()

        if not chart.series:
            ctx.error(
                header,
                "No data provided for chart",
                ErrorCode.MISSING_DATA,
                "Add bar, line, or other data series to the chart",
            )
        return chart

    def bracket_list(self) -> Iterator[Token]:
        """Yield the items of ``[a, b, ...]``; the cursor must be on ``[``.

        Commas are skipped. Running into EOF before ``]`` is reported.
        """
        ctx = self.ctx
        ctx.advance()
        while not ctx.check(TokenKind.BRACKET_CLOSE):
            if ctx.at_end():
                ctx.error(ctx.current(), "Expected closing bracket ]")
                return
            yield ctx.current()
            ctx.advance()
            if ctx.check(TokenKind.COMMA):
                ctx.advance()
        ctx.advance()

    def parse_x_axis(self, chart: XYChart) -> None:
        ctx = self.ctx
        ctx.advance()
        if not ctx.check(TokenKind.BRACKET_OPEN):
            ctx.error(
                ctx.current(),
                "x-axis must be followed by a bracketed list of labels",
                ErrorCode.INVALID_X_AXIS_SYNTAX,
                'Use x-axis ["Label1", "Label2", "Label3"] format',
            )
            return

        for item in self.bracket_list():
            if item.kind is TokenKind.STRING:
                chart.x_axis.append(item.unquoted())
            elif item.kind is TokenKind.IDENTIFIER:
                if needs_quoting(item.text):
                    ctx.error(
                        item,
                        f"Identifier '{item.text}' contains special characters and should be quoted",
                        ErrorCode.INVALID_IDENTIFIER,
                        f'Use "{item.text}" instead of {item.text}',
                    )
                chart.x_axis.append(item.text)
            elif item.kind is TokenKind.NUMBER:
                chart.x_axis.append(item.text)

    def parse_y_axis(self, chart: XYChart) -> None:
        """``y-axis "label" <min> --> <max>``."""
        ctx = self.ctx
        ctx.advance()
        if not ctx.check(TokenKind.STRING):
            return
        label = ctx.advance().unquoted()

        if ctx.check_text("min"):
            ctx.error(
                ctx.current(),
                'y-axis syntax does not support "min" keyword',
                ErrorCode.INVALID_Y_AXIS_SYNTAX,
                'Use format: y-axis "label" minValue --> maxValue',
            )
            ctx.advance()
            return
        if not ctx.check(TokenKind.NUMBER):
            return
        low = int(ctx.advance().text)
        if not ctx.check_text("-->"):
            return
        ctx.advance()
        if ctx.check(TokenKind.NUMBER):
            chart.y_axis = YAxis(label=label, min=low, max=int(ctx.advance().text))

    def parse_series(self, chart: XYChart) -> None:
        """``bar [1, 2, 3]`` / ``line [...]``; non-numeric items are ignored."""
        ctx = self.ctx
        kind = ctx.advance().text
        if not ctx.check(TokenKind.BRACKET_OPEN):
            return
        values = [int(item.text) for item in self.bracket_list() if item.kind is TokenKind.NUMBER]
        chart.series.append(Series(kind=kind, values=values))
