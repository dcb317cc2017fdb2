"""
hx - Renderers

Turn a Grid into a human-readable hex dump or a source-code array literal.
"""
from typing import Dict, List

from hx.codec import (
    ascii_sidebar, colorize as colorize_token, hex_lower_hex, offset, render_byte
)
from hx.config import ArrayFormat, DumpConfig, Format, InvalidConfiguration
from hx.paginator import Grid, Row

# Width reserved per missing column on a short row
PAD_PER_COLUMN = 5

ARRAY_HEADERS: Dict[ArrayFormat, str] = {
    ArrayFormat.RUST: 'let ARRAY: [u8; {n}] = [',
    ArrayFormat.C: 'unsigned char ARRAY[{n}] = {{',
    ArrayFormat.GO: 'a := [{n}]byte{{',
}

ARRAY_FOOTERS: Dict[ArrayFormat, str] = {
    ArrayFormat.RUST: '];',
    ArrayFormat.C: '};',
    ArrayFormat.GO: '}',
}


def _dump_row(row: Row, column_width: int, fmt: Format, colorize: bool) -> str:
    parts = [f'{offset(row.offset)}: ']

    for b in row.data:
        token = render_byte(b, fmt)
        if colorize and fmt is not Format.UNKNOWN:
            token = colorize_token(token, b)
        parts.append(token + ' ')

    missing = column_width - row.byte_count
    if missing > 0:
        parts.append(' ' * (PAD_PER_COLUMN * missing))

    parts.append(ascii_sidebar(row.data))
    return ''.join(parts)


def render_dump(grid: Grid, fmt: Format = Format.LOWER_HEX, colorize: bool = True) -> str:
    """
    Render a grid as offset / byte tokens / ASCII lines.

    Args:
        grid: Paginated bytes
        fmt: Per-byte rendering
        colorize: Wrap byte tokens in terminal colour escapes

    Returns:
        One line per row followed by a "bytes: N" summary line
    """
    lines = [_dump_row(row, grid.column_width, fmt, colorize) for row in grid]
    lines.append(f'   bytes: {grid.total_bytes}')
    return '\n'.join(lines) + '\n'


def render_array(grid: Grid, array_format: ArrayFormat) -> str:
    """
    Render a grid as an array literal, one source line per row.

    Rust and C drop the comma after the final element; Go keeps it
    because its composite literal closes on the next line.

    Raises:
        InvalidConfiguration: array_format is not an ArrayFormat
    """
    if not isinstance(array_format, ArrayFormat):
        raise InvalidConfiguration(f"Unknown array format: {array_format!r}")

    trailing_comma = array_format is ArrayFormat.GO
    lines: List[str] = [ARRAY_HEADERS[array_format].format(n=grid.total_bytes)]

    emitted = 0
    for row in grid:
        body = []
        for b in row.data:
            emitted += 1
            if emitted == grid.total_bytes and not trailing_comma:
                body.append(hex_lower_hex(b))
            else:
                body.append(f'{hex_lower_hex(b)}, ')
        lines.append('    ' + ''.join(body))

    lines.append(ARRAY_FOOTERS[array_format])
    return '\n'.join(lines) + '\n'


def render(grid: Grid, config: DumpConfig) -> str:
    """Render a grid in whichever mode the configuration selects."""
    if config.array_mode:
        return render_array(grid, config.array_format)
    return render_dump(grid, config.format, config.colorize)
