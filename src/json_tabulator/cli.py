"""Command-line interface for the JSON Tabulator."""

import logging
import sys
import click
from pathlib import Path
from typing import Optional
from . import __version__
from .converter import JSONTableConverter
from .types import ConversionResult


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )


def _emit(result: ConversionResult, output: Optional[str]) -> None:
    """Write a conversion result to a file or stdout, or fail with its errors."""
    if not result.success:
        for error in result.errors or []:
            click.echo(f"Error: {error}", err=True)
        sys.exit(1)

    if output:
        output_path = Path(output)
        output_path.write_text(result.output, encoding='utf-8')
        click.echo(f"Wrote {result.row_count} rows x {result.column_count} columns to {output_path}",
                   err=True)
    else:
        click.echo(result.output)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.option('--indent', default=2, show_default=True, help='Indentation of JSON output')
@click.option('--profile', is_flag=True, help='Log timing and memory of each conversion')
@click.pass_context
def main(ctx: click.Context, verbose: bool, indent: int, profile: bool):
    """JSON Tabulator - Convert between nested JSON and flat tables."""
    _configure_logging(verbose)
    ctx.obj = JSONTableConverter(indent=indent, enable_profiling=profile)


@main.command('to-tsv')
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', help='Output TSV file path')
@click.pass_obj
def to_tsv(converter: JSONTableConverter, input_file: Path, output: Optional[str]):
    """Flatten a JSON file into a TSV table."""
    _emit(converter.json_to_tsv(input_file.read_text(encoding='utf-8')), output)


@main.command('to-json')
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', help='Output JSON file path')
@click.pass_obj
def to_json(converter: JSONTableConverter, input_file: Path, output: Optional[str]):
    """Rebuild nested JSON from a TSV table with key-path headers."""
    _emit(converter.tsv_to_json(input_file.read_text(encoding='utf-8')), output)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', help='Output TSV file path')
@click.pass_obj
def transpose(converter: JSONTableConverter, input_file: Path, output: Optional[str]):
    """Swap rows and columns of a TSV table, using the first column as headers."""
    _emit(converter.transpose_tsv(input_file.read_text(encoding='utf-8')), output)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', help='Output JSON file path')
@click.pass_obj
def prettify(converter: JSONTableConverter, input_file: Path, output: Optional[str]):
    """Re-indent a JSON file."""
    _emit(converter.prettify(input_file.read_text(encoding='utf-8')), output)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', help='Output JSON file path')
@click.pass_obj
def minify(converter: JSONTableConverter, input_file: Path, output: Optional[str]):
    """Strip insignificant whitespace from a JSON file."""
    _emit(converter.minify(input_file.read_text(encoding='utf-8')), output)


if __name__ == '__main__':
    main()
