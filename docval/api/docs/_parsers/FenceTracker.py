"""Track fenced code blocks while reading Markdown line by line."""

import re

FENCE_PATTERN = re.compile(r"^ {0,3}(`{3,}|~{3,})(.*)$")


class FenceTracker:
    """Line-by-line state machine for ``` and ~~~ fences.

    A fence closes on a line holding only the same fence character repeated
    at least as many times as the opener.
    """

    def __init__(self) -> None:
        self._char: str | None = None
        self._length = 0

    @property
    def inside(self) -> bool:
        return self._char is not None

    def feed(self, line: str) -> bool:
        """Consume one line; return True when it is a fence line or inside a fence."""
        match = FENCE_PATTERN.match(line)
        if self._char is None:
            if match is None:
                return False
            fence = match.group(1)
            # Backtick fences cannot carry backticks in their info string
            if fence[0] == "`" and "`" in match.group(2):
                return False
            self._char, self._length = fence[0], len(fence)
            return True

        if match is not None:
            fence = match.group(1)
            if fence[0] == self._char and len(fence) >= self._length and not match.group(2).strip():
                self._char, self._length = None, 0
        return True
