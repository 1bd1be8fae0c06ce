"""mermaid-lint: structural validation of Mermaid diagram source without rendering it."""

from mermaid_lint.api import (
    get_diagram_type,
    get_version_info,
    is_mermaid_version_supported,
    is_valid,
    validate,
)
from mermaid_lint.ir import Diagnostic, ValidationResult
from mermaid_lint.syntax.lexer import tokenize
from mermaid_lint.syntax.tokens import Token, TokenKind
from mermaid_lint.types import DiagramType, ErrorCode

__all__ = [
    "Diagnostic",
    "DiagramType",
    "ErrorCode",
    "Token",
    "TokenKind",
    "ValidationResult",
    "get_diagram_type",
    "get_version_info",
    "is_mermaid_version_supported",
    "is_valid",
    "tokenize",
    "validate",
]
