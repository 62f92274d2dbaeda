"""Classification outcome for a link target."""

from enum import Enum


class LinkStatus(str, Enum):
    RESOLVED = "resolved"
    BROKEN_RELATIVE = "broken_relative"
    EXTERNAL = "external"
    AMBIGUOUS = "ambiguous"

    @property
    def is_failure(self) -> bool:
        return self in (LinkStatus.BROKEN_RELATIVE, LinkStatus.AMBIGUOUS)
