"""Document loader: enumerate Markdown files under a root and build Guides (private)."""

import os
import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from ...utils.get_logger import get_logger
from ._split_guide import _split_guide
from .DocsError import DecodeError, NotFoundError, TraversalError
from .Guide import Guide

logger = get_logger("docs.loader")


@dataclass
class _LoadResult:
    guides: list[Guide] = field(default_factory=list)
    load_errors: list[str] = field(default_factory=list)
    files_loaded: int = 0


@lru_cache(maxsize=None)
def _compile_glob(pattern: str) -> re.Pattern[str]:
    """Translate a root-relative glob: ``*`` and ``?`` stay within one path segment, ``**`` spans directories."""
    segments = pattern.split("/")
    parts = []
    for index, segment in enumerate(segments):
        last = index == len(segments) - 1
        if segment == "**":
            parts.append(".*" if last else "(?:[^/]+/)*")
        else:
            parts.append(_translate_segment(segment) + ("" if last else "/"))
    return re.compile("".join(parts) + r"\Z")


def _translate_segment(segment: str) -> str:
    out = []
    i = 0
    while i < len(segment):
        char = segment[i]
        if char == "*":
            out.append("[^/]*")
        elif char == "?":
            out.append("[^/]")
        elif char == "[" and "]" in segment[i + 2 :]:
            end = segment.index("]", i + 2)
            body = segment[i + 1 : end]
            if body.startswith("!"):
                body = "^" + body[1:]
            out.append("[" + body.replace("\\", "\\\\") + "]")
            i = end
        else:
            out.append(re.escape(char))
        i += 1
    return "".join(out)


def _is_excluded(rel_path: str, exclude: list[str]) -> bool:
    for pattern in exclude:
        if _compile_glob(pattern).match(rel_path):
            return True
        # "dir/**" also excludes the directory itself
        if pattern.endswith("/**") and _compile_glob(pattern[:-3]).match(rel_path):
            return True
    return False


def _raise_traversal_error(exc: OSError) -> None:
    raise TraversalError(exc.filename or "<unknown>", exc) from exc


def _iter_markdown_files(root: Path, extensions: list[str], exclude: list[str]) -> list[tuple[Path, str]]:
    """Return (absolute path, root-relative posix path) pairs sorted by relative path."""
    wanted = {ext.lower() for ext in extensions}
    found: list[tuple[Path, str]] = []

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_traversal_error):
        current = Path(dirpath)
        rel_dir = current.relative_to(root).as_posix()
        # Prune excluded directories in place so os.walk never enters them
        dirnames[:] = sorted(
            d for d in dirnames if not _is_excluded(d if rel_dir == "." else f"{rel_dir}/{d}", exclude)
        )
        for filename in sorted(filenames):
            file_path = current / filename
            rel_path = filename if rel_dir == "." else f"{rel_dir}/{filename}"
            if file_path.suffix.lower() not in wanted:
                continue
            if _is_excluded(rel_path, exclude):
                continue
            if not file_path.is_file():
                continue
            found.append((file_path, rel_path))

    found.sort(key=lambda item: item[1])
    return found


def _read_text(path: Path) -> str:
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise TraversalError(path, exc) from exc
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(path, exc) from exc
    return text.removeprefix("\ufeff")


def _load_guides(root: Path, extensions: list[str], exclude: list[str], separator: re.Pattern[str]) -> _LoadResult:
    """Load every Guide under ``root``.

    Raises:
        NotFoundError: root is missing or not a directory
        TraversalError: any I/O error while walking or reading
    """
    if not root.exists():
        raise NotFoundError(root)
    if not root.is_dir():
        raise NotFoundError(root, "is not a directory")

    result = _LoadResult()
    for file_path, rel_path in _iter_markdown_files(root, extensions, exclude):
        try:
            text = _read_text(file_path)
        except DecodeError as exc:
            logger.warning("Skipping %s: %s", rel_path, exc.cause)
            result.load_errors.append(f"{rel_path}: {exc.cause}")
            continue

        guides = _split_guide(file_path, rel_path, text, separator)
        logger.debug("Loaded %s as %d guide(s)", rel_path, len(guides))
        result.guides.extend(guides)
        result.files_loaded += 1

    return result
