"""Create the validate-docs Typer app."""

import os

import typer

from docval.api.config.get_package_version import get_package_version
from docval.api.docs.cmd_check import cmd_check
from docval.api.docs.render_text import render_text
from docval.cli._handle_stage_result import _handle_stage_result
from docval.cli.display.CLIDisplay import CLIDisplay

FORMATS = ("text", "json", "yaml")


def _default_format() -> str:
    """``json`` under CI (CI=true), ``text`` otherwise."""
    return "json" if os.environ.get("CI", "").strip().lower() == "true" else "text"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"validate-docs {get_package_version()}")
        raise typer.Exit()


def _print_text(output: dict) -> None:
    CLIDisplay().text_output(render_text(output))


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Check that every link in a Markdown guide corpus resolves",
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command()
    def check(
        root_dir: str = typer.Argument(..., help="Path to the documentation corpus root"),
        ignore_external: bool = typer.Option(
            False, "--ignore-external", help="Skip links with a URI scheme instead of classifying them"
        ),
        output_format: str | None = typer.Option(
            None, "--format", "-f", help="Output format: text, json or yaml (default: text, json when CI=true)"
        ),
        config: str | None = typer.Option(None, "--config", "-c", help="JSON config file (default: ROOT/.validate-docs.json)"),
        workers: int | None = typer.Option(None, "--workers", "-j", min=1, help="Worker threads"),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Show progress and debug logging"),
        version: bool = typer.Option(  # noqa: ARG001
            False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
        ),
    ) -> None:
        """Validate every Markdown link under ROOT_DIR.

        Exit codes: 0 no broken links, 1 broken or ambiguous links, 2 fatal error.
        """
        display_format = output_format or _default_format()
        if display_format not in FORMATS:
            typer.echo(f"Error: --format must be one of {', '.join(FORMATS)}, got '{display_format}'", err=True)
            raise typer.Exit(2)

        _handle_stage_result(
            cmd_check,
            display_format=display_format,
            result_printer=_print_text if display_format == "text" else None,
            show_progress=verbose,
        )(root=root_dir, ignore_external=ignore_external, config_path=config, workers=workers, verbose=verbose)

    return app
