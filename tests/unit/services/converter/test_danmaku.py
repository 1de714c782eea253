"""Tests for scrolling and fixed comment events."""

import pytest

from nicoass.services.converter.danmaku import display_text, render_fixed, render_scroll
from nicoass.services.converter.style import resolve_style


@pytest.mark.unit
class TestDanmakuEvents:
    """Tests for danmaku event rendering."""

    def test_scroll(self, make_comment, render_config):
        """Test a scrolling comment moves across its lane."""
        record = make_comment(content="hello", vpos=100)

        event = render_scroll(record, resolve_style(record.styles), 2, render_config)

        assert event.layer == 2
        assert event.style == "Danmaku"
        assert event.start == "00:00:01.0"
        assert event.end == "00:00:09.0"
        assert event.text == r"{\an7\move(1280,128,-350,128)\1c&HFFFFFF&}hello"

    @pytest.mark.parametrize("premium", [0, 24, 25])
    def test_scroll_translucent(self, make_comment, render_config, premium):
        """Test translucent premium tiers get reduced alpha."""
        record = make_comment(content="hi", mail="red", premium=premium)

        event = render_scroll(record, resolve_style(record.styles), 0, render_config)

        assert event.text == r"{\an7\alpha80\move(1280,0,-140,0)\1c&H0000FF&}hi"

    def test_fixed(self, make_comment, render_config):
        """Test top and bottom comments are anchored."""
        top = make_comment(content="top", mail="ue")
        bottom = make_comment(content="bottom", mail="shita black")

        assert render_fixed(top, resolve_style(top.styles), render_config).text == (
            r"{\an8\1c&HFFFFFF&}top"
        )
        assert render_fixed(bottom, resolve_style(bottom.styles), render_config).text == (
            r"{\an2\1c&H000000&\3c&HFFFFFF&}bottom"
        )

    def test_newlines_become_hard_breaks(self, make_comment):
        """Test multi-line text uses ASS line breaks."""
        assert display_text(make_comment(content="a\nb")) == r"a\Nb"
