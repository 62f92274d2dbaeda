"""Markdown link parser."""

import re
from collections.abc import Iterator

from .._constants import LINK_KIND_IMAGE, LINK_KIND_INLINE, LINK_KIND_REFERENCE
from ._BaseParser import BaseParser, LinkRef
from .FenceTracker import FenceTracker

# A label may hold one level of brackets, as in badge links [![alt](img)](url).
# Every character has exactly one way to match, so an unclosed "[" fails in linear time.
_LABEL = r"(?:[^\[\]]|\[[^\[\]]*\])*"
# One level of balanced parentheses, as in notes(v2).md
_DESTINATION = r"(?:[^()\s]|\([^()\s]*\))+"
_TITLE = r"""(?:\s+(?:"[^"]*"|'[^']*'|\([^)]*\)))?"""

# Compiled regex patterns
MARKDOWN_URL_PATTERN = re.compile(
    r"(!)?\[(" + _LABEL + r")\]\(\s*(<[^>\n]*>|" + _DESTINATION + r")" + _TITLE + r"\s*\)"
)
REFERENCE_DEFINITION_PATTERN = re.compile(r"^ {0,3}\[([^\]]+)\]:\s*(<[^>]*>|\S+)")
CODE_SPAN_PATTERN = re.compile(r"(`+)(.+?)(?<!`)\1(?!`)")


def _strip_angle_brackets(target: str) -> str:
    if target.startswith("<") and target.endswith(">"):
        return target[1:-1].strip()
    return target.strip()


def _code_spans(line: str) -> list[tuple[int, int]]:
    return [(m.start(), m.end()) for m in CODE_SPAN_PATTERN.finditer(line)]


def _within(position: int, spans: list[tuple[int, int]]) -> bool:
    return any(start <= position < end for start, end in spans)


class MarkdownParser(BaseParser):
    """Parser for standard Markdown inline links, images and reference definitions."""

    def parse(self, text: str) -> Iterator[LinkRef]:
        fences = FenceTracker()
        for line_num, line in enumerate(text.splitlines(), start=1):
            was_inside = fences.inside
            in_fence = fences.feed(line)
            # Opening and closing fence lines carry no links
            if in_fence and (not was_inside or not fences.inside):
                continue

            spans = [] if in_fence else _code_spans(line)

            # 1. Reference definitions: [label]: target
            ref_match = REFERENCE_DEFINITION_PATTERN.match(line)
            if ref_match and not ref_match.group(1).startswith("^"):
                target = _strip_angle_brackets(ref_match.group(2))
                if target:
                    yield LinkRef(
                        line_number=line_num,
                        column_number=ref_match.start(1),
                        raw_target=target,
                        link_type=LINK_KIND_REFERENCE,
                        alias=ref_match.group(1).strip(),
                        in_code=in_fence,
                    )
                continue

            # 2. Inline links and images: [alias](target), ![alt](src)
            yield from self._parse_inline(line, line_num, 0, in_fence, spans)

    def _parse_inline(
        self, text: str, line_num: int, offset: int, in_fence: bool, spans: list[tuple[int, int]]
    ) -> Iterator[LinkRef]:
        for match in MARKDOWN_URL_PATTERN.finditer(text):
            is_image = bool(match.group(1))
            alias = match.group(2)
            target = _strip_angle_brackets(match.group(3))
            column = offset + match.start()

            if target:
                yield LinkRef(
                    line_number=line_num,
                    column_number=column + 1,
                    raw_target=target,
                    link_type=LINK_KIND_IMAGE if is_image else LINK_KIND_INLINE,
                    alias=alias.strip(),
                    in_code=in_fence or _within(column, spans),
                )

            # Nested image inside a link label
            if "](" in alias:
                yield from self._parse_inline(alias, line_num, offset + match.start(2), in_fence, spans)
