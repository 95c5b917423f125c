"""Command line entry point: ``betawindow``."""
from __future__ import annotations
import logging
from pathlib import Path

import click

from .data_io import OUTPUT_SUFFIXES
from .exceptions import BetaWindowError
from .pipeline import run_demo, run_moving_window


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def cli(verbose):
    """Moving-window averages of dissimilarity matrices over geographic neighbourhoods."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument('dissimilarity', type=click.Path(exists=True, dir_okay=False))
@click.argument('geographic', required=False, type=click.Path(exists=True, dir_okay=False))
@click.option('--coords', type=click.Path(exists=True, dir_okay=False),
              help='Site coordinates (site_id, latitude, longitude) instead of a geographic matrix')
@click.option('--k', 'ks', type=int, multiple=True, help='Number of nearest neighbours (repeatable)')
@click.option('--radius', 'radii', type=float, multiple=True, help='Distance threshold (repeatable)')
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Write the table here (.csv, .parquet or .xlsx)')
def window(dissimilarity, geographic, coords, ks, radii, output):
    """Average DISSIMILARITY over geographic windows taken from GEOGRAPHIC or --coords."""
    if not ks and not radii:
        raise click.UsageError("Supply at least one --k or --radius.")
    if (geographic is None) == (coords is None):
        raise click.UsageError("Supply exactly one of GEOGRAPHIC or --coords.")
    out = Path(output) if output else None
    if out is not None and out.suffix.lower() not in OUTPUT_SUFFIXES:
        raise click.UsageError(f"--output must end with one of {', '.join(OUTPUT_SUFFIXES)}.")
    try:
        table = run_moving_window(
            dissimilarity, geographic, coords_path=coords, ks=ks, radii=radii,
            output_name=out.name if out else None,
            output_dir=out.parent if out else None,
        )
    except BetaWindowError as e:
        raise click.UsageError(str(e))
    if out is None:
        click.echo(table.to_string())


@cli.command()
def demo():
    """Run the ten-site example (k=4 and radius=40)."""
    click.echo(run_demo().to_string())


def main():
    cli()


if __name__ == '__main__':
    main()
