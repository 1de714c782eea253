"""ASCII-art comment rendering.

AA comments are multi-line drawings posted with a monospace font token
(``gothic`` or ``mincho``). Every line becomes its own event in the small
AA style, stacked from the top of the screen and scrolled as one block.
"""

from nicoass.config.render import RenderConfig
from nicoass.models.comment import CommentRecord
from nicoass.services.converter.style import StyleResolution
from nicoass.services.converter.templates import ASSDialogueParams
from nicoass.services.converter.timing import vpos_to_timestamp

AA_STYLE = "AA"
AA_LAYER = 1


def render_aa(
    record: CommentRecord, style: StyleResolution, config: RenderConfig
) -> list[ASSDialogueParams]:
    """Render an ASCII-art comment, one event per line.

    Args:
        record: Comment classified as ASCII art
        style: Resolved style of the comment
        config: Rendering configuration

    Returns:
        Events for the AA channel, top line first
    """
    vpos = record.vpos or 0
    start = vpos_to_timestamp(vpos)
    end = vpos_to_timestamp(vpos, config.danmaku.duration)

    aa = config.aa
    start_x = config.canvas.width
    end_x = -config.canvas.font_size * aa.exit_font_multiplier

    events = []
    for index, line in enumerate(record.content.split("\n")):
        y = (aa.font_size - 1) * index + aa.line_adjust
        events.append(
            ASSDialogueParams(
                layer=AA_LAYER,
                start=start,
                end=end,
                style=AA_STYLE,
                text=f"{{\\an4\\fsp-1\\move({start_x},{y},{end_x},{y}){style.tags}}}{line}",
            )
        )
    return events
