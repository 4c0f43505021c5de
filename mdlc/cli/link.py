"""Link commands registered on the root Typer app."""

import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from mdlc.api.link.cmd_anchors import cmd_anchors
from mdlc.api.link.cmd_check import cmd_check
from mdlc.api.link.cmd_links import cmd_links
from mdlc.cli._handle_stage_result import _handle_stage_result


def _display_path(path: str) -> str:
    """Show paths relative to the working directory when they are below it."""
    try:
        return str(Path(path).relative_to(Path.cwd()))
    except ValueError:
        return path


def _print_check_report(output: dict) -> None:
    """Print one line per broken link followed by the totals."""
    console = Console(file=sys.stderr, highlight=False, emoji=False, soft_wrap=True)
    for item in output["broken"]:
        location = f"{_display_path(item['source_file'])}:{item['line']}:{item['column']}"
        console.print(f"{escape(location)}  [red]{escape(item['reason'])}[/red]  {escape(item['raw_target'])}")
    console.print(
        f"{output['links_checked']} links in {output['files_checked']} files: "
        f"[green]{output['valid_count']} valid[/green], "
        f"[red]{output['broken_count']} broken[/red], "
        f"[yellow]{output['skipped_count']} skipped[/yellow]"
    )


def register_link_commands(app: typer.Typer) -> None:
    """Attach check, links and anchors to the root app."""

    @app.command(name="check")
    def check_cmd(
        path: str = typer.Argument(..., help="Markdown file or directory to check"),
        workers: int | None = typer.Option(None, "--workers", "-j", help="Maximum concurrent checks"),
        host_limit: int | None = typer.Option(None, "--host-limit", help="Maximum concurrent requests per host"),
        timeout: float | None = typer.Option(None, "--timeout", help="Seconds per HTTP attempt"),
        retries: int | None = typer.Option(None, "--retries", help="Retries after transient network errors"),
        run_timeout: float | None = typer.Option(None, "--run-timeout", help="Seconds for the whole run"),
        root: str | None = typer.Option(None, "--root", help="Project root for links starting with '/'"),
        ignore_scheme: list[str] | None = typer.Option(
            None, "--ignore-scheme", help="URL scheme to skip (repeatable, replaces the configured list)"
        ),
        exclude: list[str] | None = typer.Option(None, "--exclude", help="Glob of paths to skip (repeatable)"),
        offline: bool = typer.Option(False, "--offline", help="Skip http(s) targets"),
        no_bare_urls: bool = typer.Option(False, "--no-bare-urls", help="Ignore bare URLs in text"),
    ) -> None:
        """Check every link in Markdown files."""
        _handle_stage_result(cmd_check, result_printer=_print_check_report)(
            path=path,
            workers=workers,
            per_host_limit=host_limit,
            timeout_secs=timeout,
            retries=retries,
            run_timeout_secs=run_timeout,
            project_root=root,
            ignored_schemes=ignore_scheme or None,
            check_remote=False if offline else None,
            bare_urls=False if no_bare_urls else None,
            exclude_globs=exclude or None,
        )

    @app.command(name="links")
    def links_cmd(
        path: str = typer.Argument(..., help="Markdown file or directory"),
    ) -> None:
        """List links and their classification without checking them."""
        _handle_stage_result(cmd_links)(path=path)

    @app.command(name="anchors")
    def anchors_cmd(
        path: str = typer.Argument(..., help="Markdown file"),
    ) -> None:
        """List the anchors a Markdown file defines."""
        _handle_stage_result(cmd_anchors)(path=path)
