"""Scrolling and fixed user comment events."""

from nicoass.config.render import RenderConfig
from nicoass.models.comment import CommentRecord
from nicoass.services.converter.style import StyleResolution
from nicoass.services.converter.templates import ASSDialogueParams
from nicoass.services.converter.timing import vpos_to_timestamp

DANMAKU_STYLE = "Danmaku"
DANMAKU_LAYER = 2


def display_text(record: CommentRecord) -> str:
    """Comment text with newlines turned into ASS hard breaks."""
    return record.content.replace("\n", "\\N")


def _timing(record: CommentRecord, config: RenderConfig) -> tuple[str, str]:
    vpos = record.vpos or 0
    return (
        vpos_to_timestamp(vpos),
        vpos_to_timestamp(vpos, config.danmaku.duration),
    )


def render_fixed(
    record: CommentRecord, style: StyleResolution, config: RenderConfig
) -> ASSDialogueParams:
    """Render a top or bottom anchored comment.

    Args:
        record: Comment to render
        style: Resolved style (TOP or BOTTOM placement)
        config: Rendering configuration

    Returns:
        Event for the Danmaku channel
    """
    start, end = _timing(record, config)
    return ASSDialogueParams(
        layer=DANMAKU_LAYER,
        start=start,
        end=end,
        style=DANMAKU_STYLE,
        text=f"{{\\an{style.placement.alignment}{style.tags}}}{display_text(record)}",
    )


def render_scroll(
    record: CommentRecord, style: StyleResolution, lane: int, config: RenderConfig
) -> ASSDialogueParams:
    """Render a comment moving from off-screen right to off-screen left.

    Args:
        record: Comment to render
        style: Resolved style
        lane: Lane assigned by the allocator
        config: Rendering configuration

    Returns:
        Event for the Danmaku channel
    """
    start, end = _timing(record, config)
    text = display_text(record)
    danmaku = config.danmaku

    start_x = config.canvas.width
    y = danmaku.line_height * lane
    end_x = -len(text) * danmaku.glyph_advance

    alpha = "\\alpha80" if record.premium in danmaku.translucent_premiums else ""
    return ASSDialogueParams(
        layer=DANMAKU_LAYER,
        start=start,
        end=end,
        style=DANMAKU_STYLE,
        text=f"{{\\an7{alpha}\\move({start_x},{y},{end_x},{y}){style.tags}}}{text}",
    )
