"""
hx - Dump Configuration

Output formats, array-literal syntaxes and the immutable configuration
value handed from the CLI to the paginator and renderers.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Optional

DEFAULT_COLUMN_WIDTH = 10


class InvalidConfiguration(ValueError):
    """Raised for configuration values the dump pipeline cannot honour."""


class Format(Enum):
    """Per-byte numeric rendering."""
    OCTAL = auto()
    LOWER_HEX = auto()
    UPPER_HEX = auto()
    BINARY = auto()
    UNKNOWN = auto()


class ArrayFormat(Enum):
    """Source-code array literal syntaxes."""
    RUST = 'r'
    C = 'c'
    GO = 'g'


# Single-letter format flags. p, e and E were accepted historically
# (pointer, lower/upper exponent) but have no renderer.
FORMAT_FLAGS: Dict[str, Format] = {
    'o': Format.OCTAL,
    'x': Format.LOWER_HEX,
    'X': Format.UPPER_HEX,
    'b': Format.BINARY,
    'p': Format.UNKNOWN,
    'e': Format.UNKNOWN,
    'E': Format.UNKNOWN,
}

ARRAY_FLAGS: Dict[str, ArrayFormat] = {fmt.value: fmt for fmt in ArrayFormat}


def parse_format(flag: Optional[str]) -> Format:
    """Map a format flag to a Format; no flag means lower hex, anything unrecognised is UNKNOWN."""
    if flag is None:
        return Format.LOWER_HEX
    return FORMAT_FLAGS.get(flag, Format.UNKNOWN)


def parse_array_format(flag: str) -> ArrayFormat:
    """Map an array flag (r, c, g) to an ArrayFormat."""
    try:
        return ARRAY_FLAGS[flag]
    except KeyError:
        raise InvalidConfiguration(f"Unknown array format: {flag!r} (expected one of r, c, g)") from None


@dataclass(frozen=True)
class DumpConfig:
    """
    Settings for one dump invocation.

    Args:
        column_width: Bytes per row, at least 1
        format: Per-byte rendering in dump mode
        colorize: Wrap dump tokens in terminal colour escapes
        array_format: Emit an array literal instead of a dump (None = dump)
        requested_length: Bytes to read (None = whole source)
    """
    column_width: int = DEFAULT_COLUMN_WIDTH
    format: Format = Format.LOWER_HEX
    colorize: bool = True
    array_format: Optional[ArrayFormat] = None
    requested_length: Optional[int] = None

    def __post_init__(self):
        if self.column_width < 1:
            raise InvalidConfiguration(f"Column width must be at least 1, got {self.column_width}")
        if self.requested_length is not None and self.requested_length < 0:
            raise InvalidConfiguration(f"Requested length must not be negative, got {self.requested_length}")

    @property
    def array_mode(self) -> bool:
        return self.array_format is not None
