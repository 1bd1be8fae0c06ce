"""Validation driver: tokenize, dispatch on the header, assemble the result.

Never raises for malformed input; every problem the grammars recognise is a
diagnostic in the returned ``ValidationResult``.
"""

from __future__ import annotations

import logging

from mermaid_lint.ir.ast import Diagram
from mermaid_lint.ir.diagnostics import ValidationResult
from mermaid_lint.parsers import ParseContext, parser_for
from mermaid_lint.syntax.lexer import tokenize
from mermaid_lint.syntax.tokens import HEADER_TYPES, TokenKind
from mermaid_lint.types import DiagramType, ErrorCode

logger = logging.getLogger(__name__)


def parse(src: str) -> ValidationResult:
    """Parse Mermaid source and collect diagnostics.

    Leading ``%%{...}%%`` directive blocks are skipped; the next token must be
    a diagram header.
    """
    ctx = ParseContext(tokens=tokenize(src))
    ctx.skip(TokenKind.DIRECTIVE)

    header = ctx.current()
    parser_cls = parser_for(header.kind)
    if parser_cls is None:
        ctx.error(
            header,
            f"Unsupported diagram type: {header.text}",
            ErrorCode.UNSUPPORTED_DIAGRAM_TYPE,
            "Start the diagram with a header such as flowchart, sequenceDiagram or classDiagram",
        )
        ast = Diagram(type=DiagramType.Unknown, line=header.line, column=header.column)
        return ValidationResult.build(DiagramType.Unknown, ctx.diagnostics, ast)

    logger.debug("parsing %s diagram with %s", HEADER_TYPES[header.kind].value, parser_cls.__name__)
    ast = parser_cls(ctx).parse()
    logger.debug("%s diagram: %d diagnostic(s)", ast.type.value, len(ctx.diagnostics))
    return ValidationResult.build(ast.type, ctx.diagnostics, ast)
