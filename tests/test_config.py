#!/usr/bin/env python3
"""
Unit tests for configuration parsing and the sine-wave sampler.
"""
import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from hx.config import (
    ARRAY_FLAGS, DEFAULT_COLUMN_WIDTH, FORMAT_FLAGS,
    ArrayFormat, DumpConfig, Format, InvalidConfiguration,
    parse_array_format, parse_format
)
from hx.wave import sine_wave


# ============================================================================
# Test Cases: Flag parsing
# ============================================================================

class TestParseFormat:
    """Tests for single-letter format flags."""

    @pytest.mark.parametrize("flag, expected", [
        ('o', Format.OCTAL),
        ('x', Format.LOWER_HEX),
        ('X', Format.UPPER_HEX),
        ('b', Format.BINARY),
    ])
    def test_known_flags(self, flag, expected):
        assert parse_format(flag) is expected

    def test_default_is_lower_hex(self):
        assert parse_format(None) is Format.LOWER_HEX

    @pytest.mark.parametrize("flag", ['p', 'e', 'E', 'z', '', 'xx'])
    def test_unrecognised_is_unknown(self, flag):
        """Test unrecognised flags degrade to UNKNOWN instead of failing."""
        assert parse_format(flag) is Format.UNKNOWN

    def test_flag_table(self):
        assert set(FORMAT_FLAGS) == {'o', 'x', 'X', 'b', 'p', 'e', 'E'}


class TestParseArrayFormat:
    """Tests for array syntax flags."""

    def test_known_flags(self):
        assert parse_array_format('r') is ArrayFormat.RUST
        assert parse_array_format('c') is ArrayFormat.C
        assert parse_array_format('g') is ArrayFormat.GO
        assert set(ARRAY_FLAGS) == {'r', 'c', 'g'}

    def test_unknown_flag(self):
        with pytest.raises(InvalidConfiguration, match="Unknown array format"):
            parse_array_format('py')


# ============================================================================
# Test Cases: DumpConfig
# ============================================================================

class TestDumpConfig:
    """Tests for the immutable configuration value."""

    def test_defaults(self):
        config = DumpConfig()

        assert config.column_width == DEFAULT_COLUMN_WIDTH == 10
        assert config.format is Format.LOWER_HEX
        assert config.colorize is True
        assert config.array_format is None
        assert config.requested_length is None
        assert not config.array_mode

    def test_array_mode(self):
        assert DumpConfig(array_format=ArrayFormat.C).array_mode

    def test_zero_columns_rejected(self):
        """Test a column width of 0 is rejected up front."""
        with pytest.raises(InvalidConfiguration, match="at least 1"):
            DumpConfig(column_width=0)

    def test_negative_length_rejected(self):
        with pytest.raises(InvalidConfiguration):
            DumpConfig(requested_length=-5)

    def test_invalid_configuration_is_value_error(self):
        assert issubclass(InvalidConfiguration, ValueError)

    def test_frozen(self):
        config = DumpConfig()
        with pytest.raises(AttributeError):
            config.column_width = 4


# ============================================================================
# Test Cases: Sine wave
# ============================================================================

class TestSineWave:
    """Tests for the quarter sine wave sampler."""

    def test_empty(self):
        assert sine_wave(0) == "\n"

    def test_two_samples(self):
        """Test samples at 0 and pi/4."""
        assert sine_wave(2) == "0.0000,0.7071,\n"

    def test_places(self):
        assert sine_wave(2, places=2) == "0.00,0.71,\n"

    def test_ten_per_line(self):
        text = sine_wave(25, places=1)
        lines = text.split("\n")

        assert len(lines) == 4
        assert lines[0].count(",") == 10
        assert lines[1].count(",") == 10
        assert lines[2].count(",") == 5
        assert lines[3] == ""

    def test_exact_line_gets_extra_break(self):
        assert sine_wave(10, places=1).endswith(",\n\n")

    def test_monotonic(self):
        values = [float(v) for v in sine_wave(30).replace("\n", "").split(",") if v]
        assert values == sorted(values)
        assert values[0] == 0.0
        assert values[-1] < 1.0

    def test_negative_rejected(self):
        with pytest.raises(InvalidConfiguration):
            sine_wave(-1)
        with pytest.raises(InvalidConfiguration):
            sine_wave(5, places=-1)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
