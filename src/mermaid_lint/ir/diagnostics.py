"""Diagnostic records and the validation result returned to callers."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from mermaid_lint.ir.ast import Diagram
from mermaid_lint.types import DiagramType, ErrorCode


@dataclass(frozen=True)
class Diagnostic:
    line: int
    column: int
    message: str
    code: ErrorCode = ErrorCode.PARSE_ERROR
    suggestion: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "line": self.line,
            "column": self.column,
            "message": self.message,
            "code": self.code.value,
        }
        if self.suggestion is not None:
            d["suggestion"] = self.suggestion
        return d


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validation call. ``is_valid`` holds iff there are no diagnostics."""

    is_valid: bool
    diagram_type: str
    diagnostics: list[Diagnostic] = field(default_factory=list)
    ast: Diagram | None = None

    @classmethod
    def build(
        cls,
        diagram_type: DiagramType | str,
        diagnostics: list[Diagnostic],
        ast: Diagram | None = None,
    ) -> ValidationResult:
        if isinstance(diagram_type, DiagramType):
            diagram_type = diagram_type.value
        return cls(
            is_valid=not diagnostics,
            diagram_type=diagram_type,
            diagnostics=list(diagnostics),
            ast=ast,
        )

    @classmethod
    def failure(cls, diagnostic: Diagnostic) -> ValidationResult:
        """A result for input that never reached the parser."""
        return cls.build(DiagramType.Unknown, [diagnostic])

    def with_diagnostic(self, diagnostic: Diagnostic) -> ValidationResult:
        """Copy of this result with one more diagnostic; type and AST are untouched."""
        return dataclasses.replace(self, is_valid=False, diagnostics=[*self.diagnostics, diagnostic])

    @property
    def codes(self) -> list[str]:
        return [d.code.value for d in self.diagnostics]

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "isValid": self.is_valid,
            "diagramType": self.diagram_type,
            "errors": [e.to_dict() for e in self.diagnostics],
        }
        if self.ast is not None:
            d["ast"] = self.ast.to_dict()
        return d
