"""Aggregate ResolutionResults into a ValidationReport."""

from collections.abc import Iterable
from pathlib import Path

from .LinkStatus import LinkStatus
from .ResolutionResult import ResolutionResult
from .ValidationReport import ValidationReport


def build_report(
    root: Path,
    results: Iterable[ResolutionResult],
    guides_checked: int = 0,
    load_errors: Iterable[str] = (),
    skipped_links: int = 0,
) -> ValidationReport:
    """Build the report; results are re-sorted by source path, line and column."""
    ordered = sorted(results, key=lambda r: r.reference.sort_key)
    counts = {status: 0 for status in LinkStatus}
    for result in ordered:
        counts[result.status] += 1

    return ValidationReport(
        root=str(root),
        total_links=len(ordered),
        resolved_links=counts[LinkStatus.RESOLVED],
        external_links=counts[LinkStatus.EXTERNAL],
        broken_links=tuple(r for r in ordered if r.status.is_failure),
        skipped_links=skipped_links,
        guides_checked=guides_checked,
        load_errors=tuple(load_errors),
    )
