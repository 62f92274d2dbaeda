"""LinkReference dataclass: one Markdown link found inside a Guide."""

from dataclasses import dataclass

from .Guide import Guide


@dataclass(frozen=True)
class LinkReference:
    """A link occurrence with its position in the parent file."""

    guide: Guide
    label: str
    target: str
    line_number: int
    column_number: int = 1
    kind: str = "inline"  # "inline", "image" or "reference"
    in_code: bool = False

    def __post_init__(self) -> None:
        if not self.target:
            raise ValueError("LinkReference target must be non-empty")
        if self.line_number < 1:
            raise ValueError(f"LinkReference line_number must be 1-based, got {self.line_number}")

    @property
    def path_part(self) -> str:
        return self.target.split("#", 1)[0]

    @property
    def fragment(self) -> str:
        _, _, fragment = self.target.partition("#")
        return fragment

    @property
    def sort_key(self) -> tuple[str, int, int]:
        return (self.guide.rel_path, self.line_number, self.column_number)
