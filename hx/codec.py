"""
hx - Byte Codec

Fixed-width textual forms of a single byte, the ASCII sidebar rule
and terminal colouring keyed by byte value.
"""
from rich.color import Color, ColorSystem
from rich.style import Style

from hx.config import Format

UNKNOWN_TOKEN = 'unk_fmt'

# Colour 0 is the terminal default/black; NUL bytes are drawn in colour 22 instead
NUL_COLOR = 0x16


def offset(value: int) -> str:
    """Offset column, e.g. 0x000006."""
    return f'{value:#08x}'


def hex_octal(b: int) -> str:
    """Octal, e.g. 0o0006."""
    return f'{b:#06o}'


def hex_lower_hex(b: int) -> str:
    """Lowercase hex, e.g. 0xff."""
    return f'{b:#04x}'


def hex_upper_hex(b: int) -> str:
    """Uppercase hex with lowercase prefix, e.g. 0xFF."""
    # '#X' would uppercase the prefix too
    return f'0x{b:02X}'


def hex_binary(b: int) -> str:
    """Binary, e.g. 0b00000110."""
    return f'{b:#010b}'


_RENDERERS = {
    Format.OCTAL: hex_octal,
    Format.LOWER_HEX: hex_lower_hex,
    Format.UPPER_HEX: hex_upper_hex,
    Format.BINARY: hex_binary,
}


def render_byte(b: int, fmt: Format) -> str:
    """Render one byte in the given format; UNKNOWN yields a placeholder."""
    renderer = _RENDERERS.get(fmt)
    if renderer is None:
        return UNKNOWN_TOKEN
    return renderer(b)


def is_printable(b: int) -> bool:
    """True for the printable ASCII range 0x20-0x7E."""
    return 31 < b < 127


def ascii_char(b: int) -> str:
    """Sidebar character for a byte."""
    return chr(b) if is_printable(b) else '.'


def ascii_sidebar(data: bytes) -> str:
    return ''.join(ascii_char(b) for b in data)


def byte_color(b: int) -> int:
    """256-colour palette index used for a byte."""
    return NUL_COLOR if b == 0 else b


def colorize(text: str, b: int) -> str:
    """Wrap text in a foreground colour escape chosen by byte value."""
    style = Style(color=Color.from_ansi(byte_color(b)))
    return style.render(text, color_system=ColorSystem.EIGHT_BIT)
