"""Split a concatenated Markdown file into Guides (private)."""

import re
from pathlib import Path

from ._parsers import FenceTracker
from .Guide import Guide

HEADING_PATTERN = re.compile(r"^ {0,3}#{1,6}\s+(.+?)(?:\s+#+)?\s*$")


def _extract_title(text: str) -> str | None:
    """Return the text of the first ATX heading outside code fences."""
    fences = FenceTracker()
    for line in text.splitlines():
        if fences.feed(line):
            continue
        match = HEADING_PATTERN.match(line)
        if match:
            return match.group(1).strip()
    return None


def _split_guide(path: Path, rel_path: str, text: str, separator: re.Pattern[str]) -> list[Guide]:
    """Cut ``text`` on separator lines.

    Returns a single Guide with ordinal 0 when the file has no separator.
    Otherwise each sub-document gets a 1-based ordinal; text before the first
    separator counts only if it holds something besides whitespace. Separator
    lines inside code fences do not split.
    """
    lines = text.splitlines(keepends=True)
    fences = FenceTracker()

    # (line index where the chunk starts, name) for every chunk
    cuts: list[tuple[int, str | None]] = []
    for index, line in enumerate(lines):
        if fences.feed(line.rstrip("\r\n")):
            continue
        match = separator.match(line.rstrip("\r\n"))
        if match:
            name = match.groupdict().get("name") or None
            cuts.append((index + 1, name.strip() if name else None))

    if not cuts:
        return [Guide(path=path, rel_path=rel_path, raw_text=text, title=_extract_title(text))]

    chunks: list[tuple[int, str | None, str]] = []
    preamble = "".join(lines[: cuts[0][0] - 1])
    if preamble.strip():
        chunks.append((0, None, preamble))
    for position, (start, name) in enumerate(cuts):
        end = cuts[position + 1][0] - 1 if position + 1 < len(cuts) else len(lines)
        chunks.append((start, name, "".join(lines[start:end])))

    return [
        Guide(
            path=path,
            rel_path=rel_path,
            raw_text=chunk,
            ordinal=ordinal,
            name=name,
            title=_extract_title(chunk),
            line_offset=start,
        )
        for ordinal, (start, name, chunk) in enumerate(chunks, start=1)
    ]
