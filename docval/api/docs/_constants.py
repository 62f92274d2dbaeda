"""Constants for the docs domain (private)."""

LINK_KIND_INLINE = "inline"
LINK_KIND_IMAGE = "image"
LINK_KIND_REFERENCE = "reference"

DETAIL_IN_CODE = "inside example code"
DETAIL_IGNORED = "ignored by pattern"
