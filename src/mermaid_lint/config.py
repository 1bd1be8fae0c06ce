"""Centralized configuration for mermaid-lint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

# The renderer release this validator's acceptance rules were checked against.
MERMAID_VERSION_INFO: dict[str, str] = {
    "validated_against": "11.12.0",
    "last_validated": "2025-10-01",
    "cli_version": "11.12.0",
}

OutputFormat = Literal["text", "json"]


@dataclass
class ValidatorConfig:
    """Options for one CLI run."""

    target_version: str | None = None
    output_format: OutputFormat = "text"
