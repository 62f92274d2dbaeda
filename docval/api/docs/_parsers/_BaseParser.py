"""Parser interface used by the link extractor."""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from .LinkRef import LinkRef


class BaseParser(ABC):
    """Turns the raw text of one Guide into LinkRefs.

    Line numbers are 1-based and relative to the text handed in; the extractor
    shifts them by the Guide's offset into its parent file.
    """

    @abstractmethod
    def parse(self, text: str) -> Iterator[LinkRef]:
        """Yield links in appearance order (line, then column)."""
