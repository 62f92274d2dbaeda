"""Docs check API command."""

from collections.abc import Iterator
from pathlib import Path

from ...utils.configure_logging import configure_logging
from ...utils.get_logger import get_logger
from .._output_schemas.docs import DocsCheckOutput
from ..config.DocsConfig import DocsConfig
from ..StageResult import StageResult
from .DocsError import DocsError
from .LinkStatus import LinkStatus
from .validate import validate

logger = get_logger("docs.check")


def _fatal(result_obj: StageResult, root: str, message: str) -> None:
    result_obj.output = DocsCheckOutput(
        errors=[message],
        warnings=[],
        root=root,
        passed=False,
        guides_checked=0,
        total_links=0,
        resolved_links=0,
        external_links=0,
        skipped_links=0,
        broken_links=[],
        load_errors=[],
    ).model_dump(mode="python")
    result_obj.result = message
    result_obj.success = False
    result_obj.exit_code = 2


def cmd_check(
    root: str,
    ignore_external: bool = False,
    config_path: str | None = None,
    workers: int | None = None,
    verbose: bool = False,
) -> StageResult:
    """Check every Markdown link under ``root``.

    Exit status: 0 when every link resolves, 1 when any link is broken or
    ambiguous, 2 when the root or the configuration cannot be used.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        root_path = Path(root).expanduser().resolve()

        yield (0.1, "Loading configuration...")
        try:
            config = DocsConfig.discover(root_path, Path(config_path).expanduser() if config_path else None)
        except ValueError as e:
            _fatal(result_obj, str(root_path), str(e))
            return

        try:
            configure_logging(
                level="DEBUG" if verbose else config.log.level,
                log_file=Path(config.log.file).expanduser() if config.log.file else None,
            )
        except OSError as e:
            _fatal(result_obj, str(root_path), f"Cannot open log file {config.log.file}: {e.strerror or e}")
            return

        yield (0.3, "Loading guides and resolving links...")
        try:
            report = validate(root_path, config, ignore_external=ignore_external, workers=workers)
        except DocsError as e:
            logger.debug("Fatal: %s", e)
            _fatal(result_obj, str(root_path), str(e))
            return

        yield (0.9, "Building report...")
        warnings = []
        for r in report.broken_links:
            if r.status is LinkStatus.AMBIGUOUS:
                warning = f"{r.reference.guide.rel_path}:{r.reference.line_number}: ambiguous link {r.reference.target}"
                logger.warning("%s (%s)", warning, r.detail)
                warnings.append(warning)

        result_obj.output = DocsCheckOutput(
            errors=list(report.load_errors),
            warnings=warnings,
            **report.to_dict(),
        ).model_dump(mode="python")

        if report.passed:
            result_obj.result = f"All {report.total_links} links OK in {report.guides_checked} guides"
        else:
            result_obj.result = (
                f"Found {report.broken_count} broken and {report.ambiguous_count} ambiguous links "
                f"out of {report.total_links}"
            )
        result_obj.success = report.passed

        yield (1.0, "Complete")

    return StageResult(announce=f"Checking links under {root}...", progress_callback=do_work)
