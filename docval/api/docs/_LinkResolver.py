"""Link resolution strategies for Markdown link targets (private)."""

from __future__ import annotations

__all__ = ["_LinkResolver", "has_uri_scheme"]

import os
import re
from collections.abc import Callable
from pathlib import Path, PurePosixPath
from urllib.parse import unquote

from ._constants import DETAIL_IGNORED, DETAIL_IN_CODE
from .Guide import Guide
from .LinkReference import LinkReference
from .LinkStatus import LinkStatus
from .ResolutionResult import ResolutionResult

# At least two characters so Windows drive letters ("C:") are not schemes
URI_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]+:")


def has_uri_scheme(target: str) -> bool:
    return bool(URI_SCHEME_PATTERN.match(target)) or target.startswith("//")


class _LinkResolver:
    """Classifies LinkReferences against a filesystem snapshot and the loaded Guides."""

    def __init__(self, root: Path, guides: list[Guide], ignore_patterns: list[re.Pattern[str]] | None = None):
        """Initialize resolver.

        Args:
            root: Absolute corpus root, used for targets starting with "/"
            guides: All loaded Guides; named sub-documents become logical identifiers
            ignore_patterns: Targets matching any of these are never checked
        """
        self.root = root
        self.ignore_patterns = ignore_patterns or []
        self._identifiers: dict[str, set[Path]] = {}
        for guide in guides:
            if guide.name:
                self._identifiers.setdefault(guide.name, set()).add(guide.path)
        self._listings: dict[Path, tuple[str, ...]] = {}
        self.resolvers: list[tuple[Callable[[LinkReference], bool], Callable[[LinkReference], ResolutionResult]]] = [
            (self._is_example_code, self._resolve_example_code),
            (self._is_external_url, self._resolve_external_url),
            (self._is_ignored, self._resolve_ignored),
            (self._is_fragment_only, self._resolve_fragment_only),
        ]

    def resolve(self, ref: LinkReference) -> ResolutionResult:
        """Classify one link; exactly one status per reference."""
        for predicate, resolver in self.resolvers:
            if predicate(ref):
                return resolver(ref)
        return self._resolve_relative(ref)

    # Predicates
    def _is_example_code(self, ref: LinkReference) -> bool:
        return ref.in_code

    def _is_external_url(self, ref: LinkReference) -> bool:
        return has_uri_scheme(ref.target)

    def _is_ignored(self, ref: LinkReference) -> bool:
        return any(pattern.search(ref.target) for pattern in self.ignore_patterns)

    def _is_fragment_only(self, ref: LinkReference) -> bool:
        return not self._path_part(ref)

    # Resolvers
    def _resolve_example_code(self, ref: LinkReference) -> ResolutionResult:
        return ResolutionResult(reference=ref, status=LinkStatus.EXTERNAL, detail=DETAIL_IN_CODE)

    def _resolve_external_url(self, ref: LinkReference) -> ResolutionResult:
        return ResolutionResult(reference=ref, status=LinkStatus.EXTERNAL)

    def _resolve_ignored(self, ref: LinkReference) -> ResolutionResult:
        return ResolutionResult(reference=ref, status=LinkStatus.EXTERNAL, detail=DETAIL_IGNORED)

    def _resolve_fragment_only(self, ref: LinkReference) -> ResolutionResult:
        # Anchors are not validated; a same-file link resolves to its own file
        return ResolutionResult(reference=ref, status=LinkStatus.RESOLVED, resolved_path=ref.guide.path)

    def _resolve_relative(self, ref: LinkReference) -> ResolutionResult:
        """Resolve against the filesystem, then logical guide identifiers."""
        path_part = self._path_part(ref)
        if path_part.startswith("/"):
            candidate = self.root / path_part.lstrip("/")
        else:
            candidate = ref.guide.directory / path_part
        normalized = Path(os.path.normpath(candidate))

        matches = self._case_insensitive_matches(normalized)
        if len(matches) > 1:
            return ResolutionResult(
                reference=ref,
                status=LinkStatus.AMBIGUOUS,
                detail="matches " + ", ".join(matches),
            )
        if normalized.name in matches and normalized.is_file():
            return ResolutionResult(reference=ref, status=LinkStatus.RESOLVED, resolved_path=normalized)

        by_identifier = self._resolve_identifier(ref, path_part)
        if by_identifier is not None:
            return by_identifier

        if normalized.is_dir():
            detail = "target is a directory"
        elif matches and matches[0] != normalized.name:
            detail = f"did you mean {matches[0]}?"
        else:
            detail = "no such file"
        return ResolutionResult(reference=ref, status=LinkStatus.BROKEN_RELATIVE, detail=detail)

    def _resolve_identifier(self, ref: LinkReference, path_part: str) -> ResolutionResult | None:
        """Match a bare name such as "locators" or "locators.md" to a split sub-document."""
        if "/" in path_part:
            return None
        name = PurePosixPath(path_part).name
        if name.lower().endswith(".md"):
            name = name[:-3]
        paths = self._identifiers.get(name)
        if not paths:
            return None
        if len(paths) > 1:
            return ResolutionResult(
                reference=ref,
                status=LinkStatus.AMBIGUOUS,
                detail="guide name found in " + ", ".join(sorted(str(p) for p in paths)),
            )
        (path,) = paths
        return ResolutionResult(reference=ref, status=LinkStatus.RESOLVED, resolved_path=path)

    # Helpers
    @staticmethod
    def _path_part(ref: LinkReference) -> str:
        return unquote(ref.path_part.split("?", 1)[0])

    def _listing(self, directory: Path) -> tuple[str, ...]:
        cached = self._listings.get(directory)
        if cached is None:
            try:
                cached = tuple(sorted(os.listdir(directory)))
            except (NotADirectoryError, FileNotFoundError):
                cached = ()
            self._listings[directory] = cached
        return cached

    def _case_insensitive_matches(self, path: Path) -> list[str]:
        """Names in the target's directory equal to its name ignoring case."""
        if not path.name:
            return []
        wanted = path.name.casefold()
        return [name for name in self._listing(path.parent) if name.casefold() == wanted]
