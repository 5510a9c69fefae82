import asyncio
import logging
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from SRI_Generate.cli.settings import load_settings
from SRI_Generate.core.compare import compare, validate_compare
from SRI_Generate.core.digest import SELECTORS
from SRI_Generate.core.errors import IntegrityError
from SRI_Generate.core.generate import generate
from SRI_Generate.output.writer import render_output, write_output

console = Console(stderr=True)

EXIT_ERROR = 1
EXIT_MISMATCH = 2


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def run_compare(targets, timeout: float) -> int:
    validate_compare(targets)

    result = asyncio.run(compare(targets[0], targets[1], timeout=timeout))

    click.echo(f"{targets[0]}: {result.digest_a}")
    click.echo(f"{targets[1]}: {result.digest_b}")

    if not result.equal:
        console.print("[bold red]Digests do not match[/]")
        return EXIT_MISMATCH

    console.print("[green]Digests match[/]")
    return 0


def run_generate(
    targets,
    algorithm: str,
    out: Optional[str],
    timeout: float,
    indent: str,
) -> int:
    records = asyncio.run(generate(targets, algorithm, timeout=timeout))

    if out:
        write_output(records, out, indent)
        console.print(f"[green]Wrote {len(records)} integrities to {escape(out)}[/]")
    else:
        click.echo(render_output(records, indent))

    return 0


@click.command("sri-generate")
@click.argument("targets", nargs=-1, required=True)
@click.option(
    "--algorithm", "-a",
    type=click.Choice(SELECTORS),
    default=None,
    help="Hash algorithm to use (default from settings: all)",
)
@click.option(
    "--out", "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write JSON output to this file instead of stdout",
)
@click.option(
    "--compare", "-c", "compare_mode",
    is_flag=True,
    help="Compare the sha256 digests of exactly two targets",
)
@click.option(
    "--settings", "settings_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="JSON settings file",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Show debug logging",
)
def main(
    targets: tuple,
    algorithm: Optional[str],
    out: Optional[str],
    compare_mode: bool,
    settings_path: Optional[str],
    verbose: bool,
) -> None:
    """Generate Subresource Integrity digests for files, directories and URLs."""
    configure_logging(verbose)

    try:
        settings = load_settings(settings_path)
        timeout = float(settings["http"]["timeout"])
        algorithm = algorithm or settings["generate"]["algorithm"]

        if compare_mode:
            code = run_compare(list(targets), timeout)
        else:
            code = run_generate(
                list(targets),
                algorithm,
                out,
                timeout,
                settings["output"]["indent"],
            )
    except IntegrityError as exc:
        console.print(f"[bold red]Error:[/] {escape(str(exc))}", highlight=False)
        raise SystemExit(EXIT_ERROR)

    raise SystemExit(code)
