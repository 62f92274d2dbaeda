"""Output schemas for docs commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class DocsCheckOutput(BaseOutputSchema):
    """Output schema for the docs check command.

    Output structure:
    - errors: list[str] - fatal errors and per-file load errors
    - warnings: list[str] - ambiguous links, reported but still failing the run
    - root: str - absolute corpus root, empty string if it could not be resolved
    - passed: bool - True iff no broken or ambiguous links were found
    - guides_checked: int - number of Guides loaded
    - total_links: int - number of classified links
    - resolved_links / external_links / skipped_links: int
    - broken_links: list[dict] - one entry per broken or ambiguous link
    - load_errors: list[str] - files skipped because they could not be decoded
    """

    root: str = Field(..., description="Absolute corpus root")
    passed: bool = Field(..., description="True when no broken or ambiguous links were found")
    guides_checked: int = Field(..., ge=0, description="Number of Guides loaded")
    total_links: int = Field(..., ge=0, description="Number of classified links")
    resolved_links: int = Field(..., ge=0, description="Links that resolved to a file or guide")
    external_links: int = Field(..., ge=0, description="Links classified External")
    skipped_links: int = Field(..., ge=0, description="Links skipped by --ignore-external")
    broken_links: list[dict[str, Any]] = Field(..., description="Broken and ambiguous links in report order")
    load_errors: list[str] = Field(..., description="Files that could not be decoded as text")


schema_registry.register_output_schema("docs", "check", DocsCheckOutput)
