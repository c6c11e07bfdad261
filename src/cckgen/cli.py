"""Click CLI entry point for cckgen."""

from __future__ import annotations

import logging
import sys

import click
from pydantic import ValidationError

from cckgen.config import get_config
from cckgen.exceptions import CckgenError


@click.command()
@click.option(
    "--input", "input_path", default=None,
    help="Input CSV file [default: input.csv]",
)
@click.option(
    "--header", type=click.BOOL, default=None,
    help="First row of the CSV is a header [default: true]",
)
@click.option(
    "--output", "output_path", default=None,
    help="Output file, appended to [default: output.txt]",
)
@click.option(
    "--order", type=click.Choice(["first_seen", "id"]), default=None,
    help="Order of fixture blocks [default: first_seen]",
)
@click.option(
    "--buffered", is_flag=True,
    help="Render all blocks before writing any",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.option("--debug", is_flag=True, help="Debug logging")
@click.version_option(package_name="cckgen")
def main(
    input_path: str | None,
    header: bool | None,
    output_path: str | None,
    order: str | None,
    buffered: bool,
    verbose: bool,
    debug: bool,
) -> None:
    """Aggregate a fixture CSV into COMcheck fixture blocks."""
    level = logging.DEBUG if debug else (
        logging.INFO if verbose else logging.WARNING
    )
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        config = get_config()
    except ValidationError as e:
        click.echo(f"Error: invalid configuration: {e}", err=True)
        sys.exit(1)

    if input_path is not None:
        config.input_path = input_path
    if header is not None:
        config.header = header
    if output_path is not None:
        config.output_path = output_path
    if order is not None:
        config.order = order
    if buffered:
        config.buffered_output = True

    from cckgen.pipeline import run_and_save

    try:
        result = run_and_save(
            input_path=config.input_path,
            output_path=config.output_path,
            skip_header=config.header,
            config=config,
        )
    except CckgenError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Wrote {len(result.fixtures)} fixtures to {config.output_path}")


if __name__ == "__main__":
    main()
