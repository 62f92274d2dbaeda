"""StageResult dataclass for 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result from a command function following the 4-stage pattern.

    ``exit_code`` overrides the success-derived exit status (0 or 1) when a
    command needs a distinct code, e.g. 2 for fatal errors.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
    exit_code: int | None = None

    @property
    def resolved_exit_code(self) -> int:
        if self.exit_code is not None:
            return self.exit_code
        return 0 if self.success else 1

    @property
    def is_fatal(self) -> bool:
        """Fatal results carry a diagnostic but no report."""
        return self.resolved_exit_code >= 2
