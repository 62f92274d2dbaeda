"""Link reference dataclass produced by parsers, before it is bound to a Guide."""

from dataclasses import dataclass


@dataclass
class LinkRef:
    """A reference to a link found in text."""

    line_number: int
    column_number: int
    raw_target: str
    link_type: str  # "inline", "image" or "reference"
    alias: str = ""
    in_code: bool = False
