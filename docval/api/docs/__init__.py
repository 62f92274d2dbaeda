"""Docs API domain: load guides, extract links, resolve them, report."""

from .build_report import build_report
from .DocsError import DecodeError, DocsError, NotFoundError, TraversalError
from .extract_links import extract_links
from .Guide import Guide
from .LinkReference import LinkReference
from .LinkStatus import LinkStatus
from .render_text import render_text
from .ResolutionResult import ResolutionResult
from .validate import validate
from .ValidationReport import ValidationReport

__all__ = [
    "DecodeError",
    "DocsError",
    "Guide",
    "LinkReference",
    "LinkStatus",
    "NotFoundError",
    "ResolutionResult",
    "TraversalError",
    "ValidationReport",
    "build_report",
    "extract_links",
    "render_text",
    "validate",
]
