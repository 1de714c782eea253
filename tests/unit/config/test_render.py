"""Tests for rendering configuration models."""

import pytest
from pydantic import ValidationError

from nicoass.config.render import (
    DEFAULT_NG_WORDS,
    DanmakuConfig,
    FilterConfig,
    OfficeConfig,
    RenderConfig,
)


@pytest.mark.unit
class TestRenderConfig:
    """Tests for RenderConfig defaults and validation."""

    def test_defaults(self):
        """Test defaults match a 1280x720 archive."""
        config = RenderConfig()

        assert (config.canvas.width, config.canvas.height) == (1280, 720)
        assert config.canvas.font_size == 64
        assert config.danmaku.lane_capacity == 11
        assert config.danmaku.burst_limit == 11
        assert config.danmaku.translucent_premiums == [0, 24, 25]
        assert config.office.gap_threshold == 1400
        assert config.aa.font_size == 18
        assert config.vote.wrap_width == 7
        assert config.filter.suppressed_premium == 2

    def test_danmaku_derived_values(self):
        """Test glyph advance and duration in vpos units."""
        danmaku = DanmakuConfig()

        assert danmaku.glyph_advance == 70
        assert danmaku.duration_centiseconds == 800

    def test_ng_words_are_copied(self):
        """Test each config owns its blocklist."""
        config = FilterConfig()
        config.ng_words.append("extra")

        assert "extra" not in DEFAULT_NG_WORDS
        assert len(DEFAULT_NG_WORDS) == 21

    def test_link_color_must_be_hex(self):
        """Test link color validation."""
        with pytest.raises(ValidationError):
            OfficeConfig(link_color="blue")

    def test_duration_must_be_positive(self):
        """Test scroll duration validation."""
        with pytest.raises(ValidationError):
            DanmakuConfig(duration=0)
