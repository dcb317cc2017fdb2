"""
hx - Function Wave

Samples of the first quarter of a sine wave as comma-separated text.
"""
import math

from hx.config import InvalidConfiguration

SAMPLES_PER_LINE = 10


def sine_wave(length: int, places: int = 4) -> str:
    """
    Sample sin(x) for x in [0, pi/2) at `length` evenly spaced points.

    Args:
        length: Number of samples
        places: Decimal places per sample

    Returns:
        Samples each followed by ',', ten per line, newline terminated
    """
    if length < 0:
        raise InvalidConfiguration(f"Wave length must not be negative, got {length}")
    if places < 0:
        raise InvalidConfiguration(f"Decimal places must not be negative, got {places}")

    out = []
    for y in range(length):
        x = math.sin((y / length) * math.pi / 2.0)
        out.append(f'{x:.{places}f},')
        if y % SAMPLES_PER_LINE == SAMPLES_PER_LINE - 1:
            out.append('\n')
    out.append('\n')
    return ''.join(out)
