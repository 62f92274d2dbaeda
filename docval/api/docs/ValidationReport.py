"""ValidationReport dataclass: aggregate output of one validation run."""

from dataclasses import dataclass, field
from typing import Any

from .LinkStatus import LinkStatus
from .ResolutionResult import ResolutionResult


@dataclass(frozen=True)
class ValidationReport:
    """All counts and failing results of a run.

    ``broken_links`` holds both ``broken_relative`` and ``ambiguous`` results,
    ordered by source path, line and column.
    """

    root: str
    total_links: int
    resolved_links: int
    external_links: int
    broken_links: tuple[ResolutionResult, ...] = ()
    skipped_links: int = 0
    guides_checked: int = 0
    load_errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def passed(self) -> bool:
        return not self.broken_links

    @property
    def broken_count(self) -> int:
        return sum(1 for r in self.broken_links if r.status is LinkStatus.BROKEN_RELATIVE)

    @property
    def ambiguous_count(self) -> int:
        return sum(1 for r in self.broken_links if r.status is LinkStatus.AMBIGUOUS)

    def to_dict(self) -> dict[str, Any]:
        return {
            "root": self.root,
            "passed": self.passed,
            "guides_checked": self.guides_checked,
            "total_links": self.total_links,
            "resolved_links": self.resolved_links,
            "external_links": self.external_links,
            "skipped_links": self.skipped_links,
            "broken_links": [r.to_dict() for r in self.broken_links],
            "load_errors": list(self.load_errors),
        }
