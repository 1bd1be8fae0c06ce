"""Public validation API.

``validate`` is the only entry point that can see an exception from the
parser; it turns one into a ``VALIDATION_ERROR`` diagnostic so callers always
get a ``ValidationResult`` back.
"""

from __future__ import annotations

import logging
from typing import Any

from mermaid_lint.config import MERMAID_VERSION_INFO
from mermaid_lint.ir.diagnostics import Diagnostic, ValidationResult
from mermaid_lint.parser import parse
from mermaid_lint.types import ErrorCode

logger = logging.getLogger(__name__)


def get_version_info() -> dict[str, str]:
    """Which renderer version the acceptance rules were validated against."""
    return dict(MERMAID_VERSION_INFO)


def is_mermaid_version_supported(version: str) -> bool:
    """Only the exact validated version is supported."""
    return version == MERMAID_VERSION_INFO["validated_against"]


def _version_mismatch(target_version: str) -> Diagnostic:
    validated = MERMAID_VERSION_INFO["validated_against"]
    return Diagnostic(
        line=1,
        column=1,
        message=(
            f"This validator was tested against Mermaid {validated}, but you're requesting "
            f"validation for version {target_version}. Compatibility cannot be guaranteed."
        ),
        code=ErrorCode.VERSION_MISMATCH,
        suggestion=f"Use Mermaid version {validated} or update this validator to support version {target_version}",
    )


def validate(source: Any, target_version: str | None = None) -> ValidationResult:
    """Validate Mermaid source text.

    Args:
        source: Diagram source. Anything other than a non-blank string yields a
            single input diagnostic without parsing.
        target_version: Optional renderer version; a version other than the
            validated one adds a ``VERSION_MISMATCH`` diagnostic.

    Returns:
        The validation result. Never raises.
    """
    if source is None:
        return ValidationResult.failure(Diagnostic(1, 1, "Empty mermaid code", ErrorCode.EMPTY_INPUT))
    if not isinstance(source, str):
        return ValidationResult.failure(Diagnostic(1, 1, "Input must be a string", ErrorCode.INVALID_INPUT_TYPE))
    if not source.strip():
        return ValidationResult.failure(Diagnostic(1, 1, "Empty mermaid code", ErrorCode.EMPTY_INPUT))

    try:
        result = parse(source)
    except Exception as e:
        logger.exception("unexpected failure while validating input")
        return ValidationResult.failure(Diagnostic(1, 1, f"Validation error: {e}", ErrorCode.VALIDATION_ERROR))

    if target_version and not is_mermaid_version_supported(target_version):
        result = result.with_diagnostic(_version_mismatch(target_version))
    return result


def is_valid(source: Any) -> bool:
    return validate(source).is_valid


def get_diagram_type(source: Any) -> str:
    return validate(source).diagram_type
