"""Run the full pipeline: load, extract, resolve, report."""

import re
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ...utils.get_logger import get_logger
from ..config.DocsConfig import DocsConfig
from ._LinkResolver import _LinkResolver, has_uri_scheme
from ._load_guides import _load_guides
from .build_report import build_report
from .DocsError import TraversalError
from .extract_links import extract_links
from .Guide import Guide
from .ResolutionResult import ResolutionResult
from .ValidationReport import ValidationReport

logger = get_logger("docs.validate")


def _check_guide(guide: Guide, resolver: _LinkResolver, ignore_external: bool) -> tuple[list[ResolutionResult], int]:
    """Extract and resolve one Guide's links. Returns (results, skipped count)."""
    results: list[ResolutionResult] = []
    skipped = 0
    for ref in extract_links(guide):
        if ignore_external and not ref.in_code and has_uri_scheme(ref.target):
            skipped += 1
            continue
        result = resolver.resolve(ref)
        if result.status.is_failure:
            logger.debug("%s:%d %s -> %s", guide.rel_path, ref.line_number, ref.target, result.status.value)
        results.append(result)
    return results, skipped


def validate(
    root: Path | str,
    config: DocsConfig | None = None,
    ignore_external: bool = False,
    workers: int | None = None,
) -> ValidationReport:
    """Validate every link in the corpus under ``root``.

    A pure function of (root snapshot, config): two runs over an unchanged
    corpus yield equal reports.

    Raises:
        NotFoundError: root is missing or not a directory
        TraversalError: an I/O error interrupted traversal or resolution
    """
    config = config or DocsConfig()
    root_path = Path(root).expanduser().resolve()
    separator = re.compile(config.separator, re.IGNORECASE)
    ignore_patterns = [re.compile(p) for p in config.ignore_patterns]
    pool_size = workers if workers is not None else config.workers

    loaded = _load_guides(root_path, config.extensions, config.exclude, separator)
    resolver = _LinkResolver(root_path, loaded.guides, ignore_patterns)

    results: list[ResolutionResult] = []
    skipped = 0
    try:
        if pool_size > 1 and len(loaded.guides) > 1:
            with ThreadPoolExecutor(max_workers=pool_size) as executor:
                futures = [executor.submit(_check_guide, g, resolver, ignore_external) for g in loaded.guides]
                outcomes = [future.result() for future in futures]
        else:
            outcomes = [_check_guide(g, resolver, ignore_external) for g in loaded.guides]
    except OSError as exc:
        raise TraversalError(exc.filename or root_path, exc) from exc

    for guide_results, guide_skipped in outcomes:
        results.extend(guide_results)
        skipped += guide_skipped

    report = build_report(
        root_path,
        results,
        guides_checked=len(loaded.guides),
        load_errors=loaded.load_errors,
        skipped_links=skipped,
    )
    logger.info(
        "Checked %d links in %d guides: %d broken, %d ambiguous",
        report.total_links,
        report.guides_checked,
        report.broken_count,
        report.ambiguous_count,
    )
    return report
