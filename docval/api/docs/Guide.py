"""Guide dataclass: one logical documentation unit."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Guide:
    """A Markdown file, or a sub-document cut out of a concatenated file.

    ``line_offset`` counts the parent-file lines that precede this Guide so
    link line numbers always refer to the file on disk.
    """

    path: Path
    rel_path: str
    raw_text: str
    ordinal: int = 0
    name: str | None = None
    title: str | None = None
    line_offset: int = 0

    @property
    def guide_id(self) -> str:
        if self.ordinal == 0:
            return self.rel_path
        return f"{self.rel_path}#{self.ordinal}"

    @property
    def directory(self) -> Path:
        return self.path.parent
