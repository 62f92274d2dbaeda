"""Link parsers package."""

from ._BaseParser import BaseParser
from ._MarkdownParser import MarkdownParser
from .FenceTracker import FenceTracker
from .LinkRef import LinkRef

__all__ = ["BaseParser", "FenceTracker", "LinkRef", "MarkdownParser"]
