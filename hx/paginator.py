"""
hx - Paginator

Split a byte stream into fixed-width rows under a byte-count ceiling.
"""
from dataclasses import dataclass, field
from typing import BinaryIO, Iterator, List, Optional, Tuple

from hx.config import InvalidConfiguration

# Hard ceiling on bytes in one page (u16 max)
MAX_PAGE_BYTES = 0xFFFF

READ_CHUNK_SIZE = 0x1000


@dataclass(frozen=True)
class Row:
    """One line of the dump."""
    offset: int
    data: bytes

    @property
    def byte_count(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class Grid:
    """A page of rows plus the number of bytes consumed to build it."""
    column_width: int
    rows: Tuple[Row, ...] = field(default_factory=tuple)
    total_bytes: int = 0

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)


def _read_bytes(source: BinaryIO, limit: int) -> Iterator[int]:
    """Yield at most `limit` bytes from source, stopping early at EOF."""
    remaining = limit
    while remaining > 0:
        chunk = source.read(min(remaining, READ_CHUNK_SIZE))
        if not chunk:
            return
        remaining -= len(chunk)
        yield from chunk


def partition(source: BinaryIO, requested_length: Optional[int], column_width: int) -> Grid:
    """
    Read bytes from source into rows of column_width bytes.

    Reading stops at requested_length, at MAX_PAGE_BYTES or at end of
    source, whichever comes first. Nothing past that point is read.

    Args:
        source: Readable binary stream positioned at its start
        requested_length: Bytes wanted (None = until EOF)
        column_width: Bytes per row

    Returns:
        Grid whose rows are all column_width long except possibly the last

    Raises:
        InvalidConfiguration: column_width < 1 or negative requested_length
        OSError: The source could not be read
    """
    if column_width < 1:
        raise InvalidConfiguration(f"Column width must be at least 1, got {column_width}")
    if requested_length is not None and requested_length < 0:
        raise InvalidConfiguration(f"Requested length must not be negative, got {requested_length}")

    limit = MAX_PAGE_BYTES if requested_length is None else min(requested_length, MAX_PAGE_BYTES)

    rows: List[Row] = []
    line = bytearray()
    total = 0

    for b in _read_bytes(source, limit):
        line.append(b)
        total += 1

        if len(line) == column_width:
            rows.append(Row(offset=total - len(line), data=bytes(line)))
            line = bytearray()

    # Short trailing row: limit reached mid-row or source ran out
    if line:
        rows.append(Row(offset=total - len(line), data=bytes(line)))

    return Grid(column_width=column_width, rows=tuple(rows), total_bytes=total)
