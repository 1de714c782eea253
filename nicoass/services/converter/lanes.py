"""Scroll lane allocation.

Scrolling comments travel right-to-left across one of a fixed number of
horizontal lanes. The allocator picks a lane per comment, in input order,
so that a new comment does not catch up with the previous one in its lane.
"""

import math

from nicoass.config.render import DanmakuConfig


class ScrollLaneAllocator:
    """Assign scrolling comments to lanes.

    Each lane remembers until when (in vpos units) it is occupied. A new
    comment takes the first lane that is free by the time the comment's
    head would reach the previous comment's tail; if none is, it takes the
    lane that frees up earliest. When more than ``burst_limit`` comments
    share one vpos, lanes are handed out round-robin instead.

    Example:
        >>> allocator = ScrollLaneAllocator(DanmakuConfig(), canvas_width=1280)
        >>> allocator.allocate(vpos=100, length=5)
        0
        >>> allocator.allocate(vpos=100, length=5)
        1
    """

    def __init__(self, config: DanmakuConfig, canvas_width: int) -> None:
        """Initialize the allocator with every lane free.

        Args:
            config: Danmaku configuration
            canvas_width: Width of the canvas in pixels
        """
        self.config = config
        self.canvas_width = canvas_width
        self.occupied_until: list[float] = [0.0] * config.lane_capacity
        self._current_vpos: float = 0.0
        self._burst_count = 0

    def estimate_vacate(self, vpos: float, length: int) -> int:
        """Estimate when a comment placed now no longer blocks its lane.

        Longer text scrolls faster (it covers its own width plus the canvas
        in the same duration), so the estimate shrinks with length.

        Args:
            vpos: Comment timestamp
            length: Character count of the displayed text

        Returns:
            Estimated vpos
        """
        width = self.canvas_width
        travel = width / (length * self.config.glyph_advance + width)
        return math.floor(vpos + travel * self.config.duration_centiseconds)

    def allocate(self, vpos: float, length: int) -> int:
        """Pick the lane for a scrolling comment and mark it occupied.

        Args:
            vpos: Comment timestamp
            length: Character count of the displayed text

        Returns:
            Lane index
        """
        if vpos > self._current_vpos:
            self._current_vpos = vpos
            self._burst_count = 0

        vacate = self.estimate_vacate(vpos, length)
        self._burst_count += 1

        lane = self._pick_lane(vacate)
        self.occupied_until[lane] = vpos + self.config.duration_centiseconds

        if self._burst_count > self.config.burst_limit:
            lane = self._burst_count % self.config.lane_capacity
        return lane

    def _pick_lane(self, vacate: float) -> int:
        for index, until in enumerate(self.occupied_until):
            if vacate >= until:
                return index
        # min() keeps the first of equal values, so ties go to the lowest index
        return min(range(len(self.occupied_until)), key=self.occupied_until.__getitem__)
