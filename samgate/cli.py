"""CLI entry point for samgate."""

import os
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from samgate import __version__
from samgate.config import configure_logging, load_settings
from samgate.scan import ParseResult, parse_file

console = Console()
app = typer.Typer(
    name="samgate",
    help="samgate - syntactic validation of SAM alignment files.",
    add_completion=False,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def describe_counts(result: ParseResult) -> str:
    """One-line summary of what a scan accepted."""
    counts = result.counts()
    return (
        f"{result.lines_read} lines, "
        f"{'1 header' if counts['header'] else 'no header'}, "
        f"{counts['ref_seqs']} @SQ, {counts['read_groups']} @RG, "
        f"{counts['programs']} @PG, {counts['alignments']} alignments"
    )


@app.command()
def validate(
    files: Annotated[list[Path], typer.Argument(help="SAM file(s) to validate")],
    encoding: Annotated[Optional[str], typer.Option("--encoding", "-e", help="Text encoding of the files")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Log level (DEBUG, INFO, ...)")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Print record counts for valid files")] = False,
):
    """Validate SAM files, stopping at the first bad line of each."""
    settings = load_settings(encoding=encoding, log_level=log_level)
    configure_logging(settings)

    all_valid = True
    for path in files:
        result = parse_file(path, encoding=settings.encoding)
        if result.ok:
            console.print(f"[green]✓[/green] {escape(str(path))}: valid")
            if verbose:
                console.print(f"  [dim]{describe_counts(result)}[/dim]")
        else:
            all_valid = False
            console.print(f"[red]✗[/red] {escape(str(path))}: INVALID")
            console.print(f"  - {escape(str(result.error))}")
            if verbose:
                console.print(f"  [dim]accepted before failure: {describe_counts(result)}[/dim]")

    console.print()
    if all_valid:
        console.print(f"All {len(files)} file(s) passed validation.")
        return
    console.print("[red]Validation failed for one or more files.[/red]")
    raise typer.Exit(1)


@app.command()
def serve(
    port: Annotated[Optional[int], typer.Option("--port", "-p", help="Port to run the server on")] = None,
    host: Annotated[Optional[str], typer.Option("--host", help="Host to bind the server to")] = None,
):
    """Run the validation HTTP service."""
    settings = load_settings(port=port, host=host)
    configure_logging(settings)

    # The app factory reads its settings from the environment
    os.environ["SAMGATE_ENCODING"] = settings.encoding
    os.environ["SAMGATE_LOG_LEVEL"] = settings.log_level

    url = f"http://{settings.host}:{settings.port}"
    console.print(
        Panel(
            f"[bold green]Starting samgate server...[/bold green]\n\n"
            f"[link={url}]{url}[/link]\n\n"
            f"[dim]Press Ctrl+C to stop the server[/dim]",
            border_style="green",
        )
    )

    import uvicorn

    uvicorn.run(
        "samgate.api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


@app.command()
def version():
    """Show version information."""
    console.print(f"samgate v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
