#!/usr/bin/env python3
"""
hx Dump

Hex dump a file, emit it as a Rust/C/Go array literal, or print a
sampled quarter sine wave.

Usage:
    python hx_dump.py firmware.bin
    python hx_dump.py firmware.bin -c 16 -f X -t 0
    python hx_dump.py firmware.bin -l 256 -a c
    python hx_dump.py -u 40 -p 3
"""
import sys
from pathlib import Path
from typing import NoReturn, Optional

# Add parent dir to path for hx package
sys.path.insert(0, str(Path(__file__).parent.parent))

import click
from rich.console import Console
from rich.markup import escape

from hx import __version__
from hx.config import (
    DEFAULT_COLUMN_WIDTH, DumpConfig, InvalidConfiguration,
    parse_array_format, parse_format
)
from hx.paginator import MAX_PAGE_BYTES, partition
from hx.render import render
from hx.wave import sine_wave

# Dump text goes to stdout through click; status and errors go here
err_console = Console(stderr=True)


def fail(error: Exception) -> NoReturn:
    err_console.print(f'[red]error = "{escape(str(error))}"[/]')
    raise SystemExit(1)


def build_config(cols: int, length: Optional[int], fmt: Optional[str],
                 color: str, array: Optional[str]) -> DumpConfig:
    """Turn raw option values into a validated DumpConfig."""
    return DumpConfig(
        column_width=cols,
        format=parse_format(fmt),
        colorize=color == '1',
        array_format=parse_array_format(array) if array else None,
        requested_length=length,
    )


def dump_file(path: Path, config: DumpConfig, verbose: int = 0) -> str:
    """
    Read a file and render it according to config.

    Raises:
        OSError: The file could not be read
    """
    requested = config.requested_length
    if requested is None:
        requested = path.stat().st_size

    if verbose:
        err_console.print(f"[dim]Source: {escape(str(path))} ({path.stat().st_size:,} bytes)[/]")
    if verbose > 1:
        mode = f"array ({config.array_format.name})" if config.array_mode else "dump"
        err_console.print(f"[dim]Mode: {mode}, format: {config.format.name}, "
                          f"columns: {config.column_width}, colorize: {config.colorize}[/]")

    with open(path, 'rb') as f:
        grid = partition(f, requested, config.column_width)

    if verbose > 1:
        err_console.print(f"[dim]Read {grid.total_bytes:,} bytes into {len(grid)} rows[/]")
    if verbose and requested > MAX_PAGE_BYTES:
        err_console.print(f"[yellow]Output capped at {MAX_PAGE_BYTES:,} bytes[/]")

    return render(grid, config)


@click.command()
@click.argument('inputfile', required=False, type=click.Path(exists=True, dir_okay=False))
@click.option('-c', '--cols', type=int, default=DEFAULT_COLUMN_WIDTH, help='Set column length')
@click.option('-l', '--len', 'length', type=int, default=None, help='Set <len> bytes to read')
@click.option('-f', '--format', 'fmt', default=None,
              help='Set format of octet: Octal (o), LowerHex (x), UpperHex (X), Binary (b)')
@click.option('-t', '--color', type=click.Choice(['0', '1']), default='1',
              help='Set color tint terminal output. 0 to disable, 1 to enable')
@click.option('-a', '--array', type=click.Choice(['r', 'c', 'g']), default=None,
              help='Set source code format output: rust (r), C (c), golang (g)')
@click.option('-u', '--func', 'func_length', type=int, default=None, help='Set function wave length')
@click.option('-p', '--places', type=int, default=4, help='Set function wave output decimal places')
@click.option('-v', 'verbose', count=True, help='Sets verbosity level')
@click.version_option(__version__, prog_name='hx-dump')
def main(inputfile: Optional[str], cols: int, length: Optional[int], fmt: Optional[str],
         color: str, array: Optional[str], func_length: Optional[int], places: int, verbose: int):
    """Hex dump INPUTFILE, or emit it as a source-code array literal."""
    if func_length is not None:
        try:
            click.echo(sine_wave(func_length, places), nl=False)
        except InvalidConfiguration as e:
            fail(e)
        return

    if inputfile is None:
        raise click.UsageError("Missing argument 'INPUTFILE'.")

    try:
        config = build_config(cols, length, fmt, color, array)
        text = dump_file(Path(inputfile), config, verbose)
        click.echo(text, nl=False, color=True if config.colorize else None)
    except (InvalidConfiguration, OSError) as e:
        fail(e)


if __name__ == '__main__':
    main()
