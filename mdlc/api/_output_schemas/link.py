"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkCheckOutput(BaseOutputSchema):
    """Output schema for link check command."""

    path: str = Field(..., description="Checked file or directory")
    files_checked: int = Field(..., description="Number of Markdown files scanned")
    links_checked: int = Field(..., description="Number of link occurrences checked")
    valid_count: int = Field(..., description="Links that resolved")
    broken_count: int = Field(..., description="Links that did not resolve")
    skipped_count: int = Field(..., description="Links deliberately not checked")
    is_valid: bool = Field(..., description="True when no link is broken")
    broken: list[dict[str, Any]] = Field(..., description="Broken results in source order")
    results: list[dict[str, Any]] = Field(..., description="Every result in source order")


class LinkLinksOutput(BaseOutputSchema):
    """Output schema for link links command."""

    path: str = Field(..., description="Scanned file or directory")
    files_scanned: int = Field(..., description="Number of Markdown files scanned")
    links: list[dict[str, Any]] = Field(..., description="Occurrences with their classification, in source order")


class LinkAnchorsOutput(BaseOutputSchema):
    """Output schema for link anchors command."""

    path: str = Field(..., description="Markdown file whose anchors were indexed")
    anchors: list[str] = Field(..., description="Anchor identifiers in document order")


register_output_schema("link", "check", LinkCheckOutput)
register_output_schema("link", "links", LinkLinksOutput)
register_output_schema("link", "anchors", LinkAnchorsOutput)
