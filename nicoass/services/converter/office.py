"""Operator (office) comment buffering.

Operator comments are shown in a banner across the top of the screen. The
banner's end time is only known once the next operator action arrives, so
the latest operator comment is held back until either another operator
comment shows up or the stream has moved on past a gap threshold.

A comment still pending when the stream ends is never flushed.
"""

import re
from dataclasses import dataclass

from nicoass.config.render import RenderConfig
from nicoass.core.logging import get_logger
from nicoass.core.state_machine import BufferPhase, create_buffer_state_machine
from nicoass.models.comment import CommentRecord
from nicoass.services.converter.style import WHITE, ass_color
from nicoass.services.converter.templates import ASSDialogueParams
from nicoass.services.converter.timing import vpos_to_timestamp

logger = get_logger(__name__)

OFFICE_STYLE = "Office"
BAND_LAYER = 4
TEXT_LAYER = 5

_ANCHOR_OPEN_RE = re.compile(r"<a href=(.*?)><u>")
_ANCHOR_CLOSE = "</u></a>"
# Whitespace before a URL goes with it
_URL_RE = re.compile(r"\s*https?://[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]+")
_FULL_WIDTH_SPACE = "　"


@dataclass(frozen=True)
class PendingOperatorComment:
    """Operator comment waiting for its end time.

    Attributes:
        start: Start timestamp
        end: Default end timestamp (start + display duration)
        text: Raw comment text
        vpos: Comment timestamp in centiseconds
    """

    start: str
    end: str
    text: str
    vpos: int


def band_drawing(width: int, height: int) -> str:
    """Vector drawing of a width x height rectangle."""
    return f"m 0 0 l {width} 0 l {width} {height} l 0 {height}"


def band_event(start: str, end: str, config: RenderConfig) -> ASSDialogueParams:
    """Translucent black band behind operator text.

    Args:
        start: Start timestamp
        end: End timestamp
        config: Rendering configuration

    Returns:
        Layer 4 Office event
    """
    width = config.canvas.width
    height = config.office.band_height
    return ASSDialogueParams(
        layer=BAND_LAYER,
        start=start,
        end=end,
        style=OFFICE_STYLE,
        text=(
            f"{{\\an5\\p1\\pos({width // 2},{height // 2})\\bord0\\1c&H000000&\\1a&H78&}}"
            f"{band_drawing(width, height)}"
        ),
    )


def strip_links(text: str) -> tuple[str, bool]:
    """Remove anchor markup and URLs from operator text.

    Args:
        text: Operator text

    Returns:
        Tuple of (cleaned text, whether the text carried a link)
    """
    if "href" not in text and not _URL_RE.search(text):
        return text, False
    text = _ANCHOR_OPEN_RE.sub("", text).replace(_ANCHOR_CLOSE, "")
    return _URL_RE.sub("", text), True


class OperatorBuffer:
    """Holds at most one pending operator comment.

    Example:
        >>> buffer = OperatorBuffer(RenderConfig())
        >>> buffer.hold(CommentRecord(content="Welcome", user_id="-", vpos=100))
        >>> buffer.should_flush(CommentRecord(content="hi", vpos=200))
        False
        >>> events = buffer.flush()
        >>> len(events)
        2
    """

    def __init__(self, config: RenderConfig) -> None:
        """Initialize an empty buffer.

        Args:
            config: Rendering configuration
        """
        self.config = config
        self._state = create_buffer_state_machine()
        self._pending: PendingOperatorComment | None = None

    @property
    def is_pending(self) -> bool:
        return self._state.current is BufferPhase.PENDING

    @property
    def pending(self) -> PendingOperatorComment | None:
        return self._pending

    def should_flush(self, record: CommentRecord) -> bool:
        """Decide whether the pending comment must be emitted before `record`.

        Args:
            record: Next accepted comment in input order

        Returns:
            True when a comment is pending and either `record` comes from an
            operator or it is more than the gap threshold later
        """
        if self._pending is None or record.vpos is None:
            return False
        gap = record.vpos - self._pending.vpos
        return record.is_operator or gap > self.config.office.gap_threshold

    def hold(self, record: CommentRecord) -> None:
        """Make `record` the pending operator comment.

        Args:
            record: Operator comment

        Raises:
            InvalidTransitionError: If a comment is already pending
        """
        vpos = record.vpos or 0
        self._state.transition(BufferPhase.PENDING)
        self._pending = PendingOperatorComment(
            start=vpos_to_timestamp(vpos),
            end=vpos_to_timestamp(vpos, self.config.danmaku.duration),
            text=record.content,
            vpos=vpos,
        )

    def flush(self, end: str | None = None) -> list[ASSDialogueParams]:
        """Emit the pending comment and clear the buffer.

        Args:
            end: End timestamp overriding the default display duration

        Returns:
            Band and text events (empty if nothing is pending)
        """
        pending = self._pending
        if pending is None:
            return []

        end = end or pending.end
        office = self.config.office
        text, has_link = strip_links(pending.text.replace("/perm", ""))
        color = ass_color(office.link_color) + "\\u1" if has_link else ass_color(WHITE)
        size = f"\\fs{office.long_text_font_size}" if len(text) > office.long_text_threshold else ""

        x = self.config.canvas.width // 2
        y = office.band_height // 2
        line = f"{{\\an5\\pos({x},{y})\\bord0{color}\\fsp0{size}}}{text}"

        self._state.transition(BufferPhase.EMPTY)
        self._pending = None
        logger.debug("Operator comment flushed", vpos=pending.vpos, has_link=has_link)

        return [
            band_event(pending.start, end, self.config),
            ASSDialogueParams(
                layer=TEXT_LAYER,
                start=pending.start,
                end=end,
                style=OFFICE_STYLE,
                text=line.replace(_FULL_WIDTH_SPACE, "  "),
            ),
        ]
