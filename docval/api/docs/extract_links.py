"""Link extractor: bind parser output to a Guide."""

from ._parsers import BaseParser, MarkdownParser
from .Guide import Guide
from .LinkReference import LinkReference


def extract_links(guide: Guide, parser: BaseParser | None = None) -> list[LinkReference]:
    """Return every Markdown link in ``guide`` in appearance order.

    Line numbers are shifted by ``guide.line_offset`` so they point into the
    file on disk.
    """
    parser_instance = parser or MarkdownParser()
    return [
        LinkReference(
            guide=guide,
            label=ref.alias,
            target=ref.raw_target,
            line_number=ref.line_number + guide.line_offset,
            column_number=ref.column_number,
            kind=ref.link_type,
            in_code=ref.in_code,
        )
        for ref in parser_instance.parse(guide.raw_text)
    ]
