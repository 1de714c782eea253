"""ASS document templates.

The header, style line and event line formats live in files next to this
module and are filled with `string.Template`, so the long ASS format
strings stay out of the Python code.
"""

from dataclasses import asdict, dataclass
from pathlib import Path
from string import Template
from typing import Literal

from nicoass.core.logging import get_logger

logger = get_logger(__name__)

TEMPLATE_DIR = Path(__file__).parent

BASE_TEMPLATE = "ass_base.ass"
STYLE_TEMPLATE = "ass_style.txt"
DIALOGUE_TEMPLATE = "ass_dialogue.txt"


@dataclass
class ASSStyleParams:
    """One row of the ``[V4+ Styles]`` table.

    Field names follow the style Format line. Colors use the ``&HAABBGGRR``
    notation; ``bold`` is ``-1`` for bold, ``0`` otherwise.
    """

    name: str
    font_name: str
    font_size: int
    primary_color: str = "&H00FFFFFF"
    secondary_color: str = "&H00FFFFFF"
    outline_color: str = "&H00000000"
    back_color: str = "&H00000000"
    bold: int = 0
    italic: int = 0
    underline: int = 0
    strikeout: int = 0
    scale_x: int = 100
    scale_y: int = 100
    spacing: int = 0
    angle: int = 0
    border_style: int = 1
    outline: int | float = 2
    shadow: int = 0
    alignment: int = 2
    margin_l: int = 0
    margin_r: int = 0
    margin_v: int = 0
    encoding: int = 0


@dataclass
class ASSDialogueParams:
    """One line of the ``[Events]`` section.

    Attributes:
        kind: "Dialogue" lines are drawn, "Comment" lines are not
        layer: Higher layers are drawn above lower ones
        start: Start timestamp
        end: End timestamp
        style: Name of a style in the style table
        text: Event text including override tags
    """

    kind: Literal["Dialogue", "Comment"] = "Dialogue"
    layer: int = 0
    start: str = "0:00:00.00"
    end: str = "0:00:00.00"
    style: str = "Default"
    name: str = ""
    margin_l: int = 0
    margin_r: int = 0
    margin_v: int = 0
    effect: str = ""
    text: str = ""


class ASSTemplateLoader:
    """Reads the template files once and renders document parts.

    Usage:
        >>> loader = ASSTemplateLoader()
        >>> style = ASSStyleParams(name="Danmaku", font_name="Source Han Sans JP", font_size=64)
        >>> header = loader.render_header(styles=[style])
        >>> line = loader.render_dialogue(ASSDialogueParams(start="00:00:01.0", text="Hello"))
    """

    def __init__(self, template_dir: Path | None = None) -> None:
        """Initialize loader.

        Args:
            template_dir: Directory holding the template files
        """
        self.template_dir = template_dir or TEMPLATE_DIR
        self._templates: dict[str, Template] = {}

    def _template(self, filename: str) -> Template:
        if filename not in self._templates:
            text = (self.template_dir / filename).read_text(encoding="utf-8")
            # Line templates are rendered without their trailing newline
            if filename != BASE_TEMPLATE:
                text = text.strip()
            self._templates[filename] = Template(text)
            logger.debug("Loaded ASS template", template=filename)
        return self._templates[filename]

    def render_style(self, params: ASSStyleParams) -> str:
        """Render a ``Style:`` line."""
        return self._template(STYLE_TEMPLATE).safe_substitute(asdict(params))

    def render_header(
        self,
        styles: list[ASSStyleParams],
        play_res_x: int = 1280,
        play_res_y: int = 720,
    ) -> str:
        """Render everything up to and including the events Format line.

        Args:
            styles: Style table rows in order
            play_res_x: Script resolution width
            play_res_y: Script resolution height

        Returns:
            Header text ending with a newline
        """
        return self._template(BASE_TEMPLATE).safe_substitute(
            play_res_x=play_res_x,
            play_res_y=play_res_y,
            styles="\n".join(self.render_style(style) for style in styles),
        )

    def render_dialogue(self, params: ASSDialogueParams) -> str:
        """Render a ``Dialogue:`` or ``Comment:`` line (no newline)."""
        return self._template(DIALOGUE_TEMPLATE).safe_substitute(asdict(params))


__all__ = [
    "ASSDialogueParams",
    "ASSStyleParams",
    "ASSTemplateLoader",
]
