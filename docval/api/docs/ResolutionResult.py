"""ResolutionResult dataclass: the classification of one LinkReference."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .LinkReference import LinkReference
from .LinkStatus import LinkStatus


@dataclass(frozen=True)
class ResolutionResult:
    reference: LinkReference
    status: LinkStatus
    resolved_path: Path | None = None
    detail: str = ""

    def __post_init__(self) -> None:
        # resolved_path is present iff the link resolved
        if (self.status is LinkStatus.RESOLVED) != (self.resolved_path is not None):
            raise ValueError(f"resolved_path must be set if and only if status is resolved (status={self.status.value})")

    def to_dict(self) -> dict[str, Any]:
        ref = self.reference
        return {
            "source": ref.guide.rel_path,
            "guide": ref.guide.guide_id,
            "line_number": ref.line_number,
            "column_number": ref.column_number,
            "label": ref.label,
            "target": ref.target,
            "status": self.status.value,
            "resolved_path": str(self.resolved_path) if self.resolved_path else None,
            "detail": self.detail,
        }
