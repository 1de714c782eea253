"""ASS document assembly.

The document is the script header, the fixed style table and three event
channels written in order: Office (operator comments and polls), Danmaku
(scrolling and fixed comments) and AA. Each channel opens with a
non-rendered ``Comment:`` line naming it.
"""

from dataclasses import dataclass, field

from nicoass.config.render import RenderConfig
from nicoass.services.converter.aa import AA_STYLE
from nicoass.services.converter.danmaku import DANMAKU_STYLE
from nicoass.services.converter.office import OFFICE_STYLE
from nicoass.services.converter.templates import (
    ASSDialogueParams,
    ASSStyleParams,
    ASSTemplateLoader,
)
from nicoass.services.converter.vote import VOTE_STYLE

# Fonts of the legacy styles kept for compatibility with existing scripts
LEGACY_FONT = "微软雅黑"
AA_FONT = "黑体"


def channel_header(style: str, label: str) -> ASSDialogueParams:
    """Placeholder line opening an event channel."""
    return ASSDialogueParams(kind="Comment", style=style, text=label)


@dataclass
class EventChannels:
    """Append-ordered event lists, one per output channel.

    Attributes:
        office: Operator comments and vote overlays
        danmaku: Scrolling and fixed user comments
        aa: ASCII-art comments
    """

    office: list[ASSDialogueParams] = field(
        default_factory=lambda: [channel_header(OFFICE_STYLE, "运营弹幕")]
    )
    danmaku: list[ASSDialogueParams] = field(
        default_factory=lambda: [channel_header(DANMAKU_STYLE, "普通弹幕")]
    )
    aa: list[ASSDialogueParams] = field(
        default_factory=lambda: [channel_header(AA_STYLE, "AA弹幕")]
    )

    def ordered(self) -> list[ASSDialogueParams]:
        """All events in document order."""
        return [*self.office, *self.danmaku, *self.aa]


def default_styles(config: RenderConfig) -> list[ASSStyleParams]:
    """Style table of the document.

    Args:
        config: Rendering configuration

    Returns:
        Default, Alternate, AA, Office, Anketo and Danmaku styles
    """
    canvas = config.canvas

    def overlay(name: str, font_size: int) -> ASSStyleParams:
        return ASSStyleParams(
            name=name,
            font_name=canvas.font_name,
            font_size=font_size,
            bold=-1,
            spacing=2,
            outline=1.5,
            margin_v=10,
        )

    return [
        ASSStyleParams(name="Default", font_name=LEGACY_FONT, font_size=54),
        ASSStyleParams(name="Alternate", font_name=LEGACY_FONT, font_size=36),
        ASSStyleParams(
            name=AA_STYLE, font_name=AA_FONT, font_size=config.aa.font_size, bold=-1, outline=0
        ),
        overlay(OFFICE_STYLE, config.office.font_size),
        overlay(VOTE_STYLE, canvas.font_size),
        overlay(DANMAKU_STYLE, canvas.font_size),
    ]


def assemble(
    channels: EventChannels,
    config: RenderConfig,
    loader: ASSTemplateLoader | None = None,
) -> str:
    """Render the complete ASS document.

    Args:
        channels: Collected events
        config: Rendering configuration
        loader: Template loader (a new one is created if omitted)

    Returns:
        ASS document text; every line ends with a newline
    """
    loader = loader or ASSTemplateLoader()
    header = loader.render_header(
        styles=default_styles(config),
        play_res_x=config.canvas.width,
        play_res_y=config.canvas.height,
    )
    lines = [loader.render_dialogue(event) for event in channels.ordered()]
    return header + "".join(f"{line}\n" for line in lines)
