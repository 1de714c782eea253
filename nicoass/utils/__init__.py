"""Standalone utilities."""

from nicoass.utils.segment_template import SegmentTemplate

__all__ = ["SegmentTemplate"]
