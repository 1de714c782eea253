"""Tests for event timestamp formatting."""

import pytest

from nicoass.services.converter.timing import format_timestamp, vpos_to_timestamp


@pytest.mark.unit
class TestFormatTimestamp:
    """Tests for format_timestamp."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (0, "00:00:00.0"),
            (3661.5, "01:01:01.5"),
            (12, "00:00:12.0"),
            (75.25, "00:01:15.25"),
            (0.125, "00:00:00.13"),
        ],
    )
    def test_format(self, seconds, expected):
        """Test zero padding, fractional digits and half-away rounding."""
        assert format_timestamp(seconds) == expected

    def test_vpos_with_offset(self):
        """Test vpos conversion with the display duration added."""
        assert vpos_to_timestamp(100) == "00:00:01.0"
        assert vpos_to_timestamp(100, 8.0) == "00:00:09.0"
