"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from typing import Any, TypeVar

from docval.api.validate_output import validate_output

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Any,
    display_format: str,
    result_printer: Callable[[dict], None] | None = None,
    show_progress: bool = True,
) -> None:
    """Run command once and display result.

    Commands must handle all expected exceptions internally and format errors
    via their domain-specific output schema.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    if show_progress:
        display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        if show_progress:
            display.info(f"Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    try:
        result.output = validate_output(func, result.output)
    except ValueError as e:
        raise ValueError(f"Output structure validation failed: {e}") from e

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    # Stage 4: Output (fatal results carry no report)
    if not result.is_fatal:
        if result_printer:
            result_printer(result.output)
        else:
            display.json_output(result.output, format=display_format)

    sys.exit(result.resolved_exit_code)
