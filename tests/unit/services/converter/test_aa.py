"""Tests for ASCII-art rendering."""

import pytest

from nicoass.config.render import AAConfig, RenderConfig
from nicoass.services.converter.aa import render_aa
from nicoass.services.converter.style import resolve_style


@pytest.mark.unit
class TestRenderAA:
    """Tests for render_aa."""

    def test_one_event_per_line(self, make_comment, render_config):
        """Test lines are stacked by the AA font size."""
        record = make_comment(content="ab\ncd\nef", mail="gothic", vpos=100)

        events = render_aa(record, resolve_style(record.styles), render_config)

        assert [event.text for event in events] == [
            r"{\an4\fsp-1\move(1280,0,-640,0)\1c&HFFFFFF&}ab",
            r"{\an4\fsp-1\move(1280,17,-640,17)\1c&HFFFFFF&}cd",
            r"{\an4\fsp-1\move(1280,34,-640,34)\1c&HFFFFFF&}ef",
        ]
        assert {(event.layer, event.style) for event in events} == {(1, "AA")}
        assert events[0].start == "00:00:01.0"
        assert events[0].end == "00:00:09.0"

    def test_color_and_line_adjust(self, make_comment):
        """Test color tags and the configured line offset."""
        config = RenderConfig(aa=AAConfig(line_adjust=5))
        record = make_comment(content="x\ny", mail="mincho blue")

        events = render_aa(record, resolve_style(record.styles), config)

        assert events[1].text == r"{\an4\fsp-1\move(1280,22,-640,22)\1c&HFF0000&}y"
