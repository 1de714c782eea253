"""Rendering configuration models.

This module provides typed Pydantic configuration for every constant the
converter uses:
- Canvas (resolution, font)
- Scrolling and fixed danmaku
- Operator (office) comments
- Vote overlay
- ASCII-art comments
- Comment filtering

Defaults reproduce the layout of a 1280x720 niconico live archive.
"""

from pydantic import BaseModel, Field

DEFAULT_NG_WORDS: list[str] = [
    "※ NGコメント",
    "/clear",
    "/trialpanel",
    "/spi",
    "/disconnect",
    "/gift",
    "/commentlock",
    "/nicoad",
    "/info",
    "/jump",
    "/play",
    "/redirect",
    "ニコニ広告しました",
    "Display Forbidden",
    "Hidden Restricted",
    "30分延長しました",
    "Ended",
    "Display Restricted",
    "Hide Marquee",
    "【ギフト貢献",
    "/ichiba",
]


class CanvasConfig(BaseModel):
    """Canvas and base font configuration.

    Attributes:
        width: PlayResX of the document
        height: PlayResY of the document
        font_name: Font family for danmaku, office and vote styles
        font_size: Base font size for danmaku and vote styles
    """

    width: int = Field(default=1280, ge=1, description="Canvas width")
    height: int = Field(default=720, ge=1, description="Canvas height")
    font_name: str = Field(default="Source Han Sans JP", description="Font family")
    font_size: int = Field(default=64, ge=1, description="Base font size")


class DanmakuConfig(BaseModel):
    """Scrolling and fixed comment configuration.

    Attributes:
        glyph_size: Glyph advance used to compute the exit point of a scroll
        glyph_spacing: Extra spacing per glyph
        line_height: Vertical distance between lanes
        duration: Display duration in seconds
        lane_capacity: Number of scroll lanes
        burst_limit: Comments sharing one vpos before round-robin lanes kick in
        translucent_premiums: Premium tiers rendered with reduced alpha
    """

    glyph_size: int = Field(default=68, ge=1, description="Danmaku glyph size")
    glyph_spacing: int = Field(default=2, ge=0, description="Glyph spacing")
    line_height: int = Field(default=64, ge=1, description="Lane height")
    duration: float = Field(default=8.0, gt=0, description="Display duration in seconds")
    lane_capacity: int = Field(default=11, ge=1, description="Number of lanes")
    burst_limit: int = Field(default=11, ge=1, description="Same-vpos burst limit")
    translucent_premiums: list[int] = Field(
        default_factory=lambda: [0, 24, 25], description="Premium tiers drawn translucent"
    )

    @property
    def duration_centiseconds(self) -> float:
        """Display duration in vpos units."""
        return self.duration * 100.0

    @property
    def glyph_advance(self) -> int:
        """Horizontal advance of one glyph."""
        return self.glyph_size + self.glyph_spacing


class OfficeConfig(BaseModel):
    """Operator comment configuration.

    Attributes:
        font_size: Office style font size
        band_height: Height of the background band behind operator text
        gap_threshold: Centiseconds after which a pending comment is flushed
        long_text_threshold: Character count above which text is shrunk
        long_text_font_size: Font size for long text
        link_color: RGB color of text carrying links
    """

    font_size: int = Field(default=40, ge=1, description="Office font size")
    band_height: int = Field(default=72, ge=1, description="Background band height")
    gap_threshold: int = Field(default=1400, ge=0, description="Flush gap in centiseconds")
    long_text_threshold: int = Field(default=50, ge=1, description="Long text threshold")
    long_text_font_size: int = Field(default=30, ge=1, description="Long text font size")
    link_color: str = Field(default="0080FF", pattern=r"^[0-9A-Fa-f]{6}$", description="Link color")


class VoteConfig(BaseModel):
    """Vote overlay configuration.

    Attributes:
        wrap_width: Characters per line of option text
        max_lines: Lines of option text before the remainder is kept on the last line
    """

    wrap_width: int = Field(default=7, ge=1, description="Option text wrap width")
    max_lines: int = Field(default=3, ge=1, description="Option text lines")


class AAConfig(BaseModel):
    """ASCII-art comment configuration.

    Attributes:
        font_size: AA style font size
        line_adjust: Extra vertical offset added to every AA line
        exit_font_multiplier: Exit point as a multiple of the canvas font size
    """

    font_size: int = Field(default=18, ge=2, description="AA font size")
    line_adjust: int = Field(default=0, description="AA line offset")
    exit_font_multiplier: int = Field(default=10, ge=1, description="Exit point multiplier")


class FilterConfig(BaseModel):
    """Comment filtering configuration.

    Attributes:
        ng_words: Substrings that drop a comment
        suppressed_premium: Premium tier that is never rendered
    """

    ng_words: list[str] = Field(default_factory=lambda: list(DEFAULT_NG_WORDS))
    suppressed_premium: int | None = Field(default=2, description="Suppressed premium tier")


class RenderConfig(BaseModel):
    """Complete rendering configuration.

    Attributes:
        canvas: Canvas settings
        danmaku: Scrolling/fixed danmaku settings
        office: Operator comment settings
        vote: Vote overlay settings
        aa: ASCII-art settings
        filter: Comment filter settings
    """

    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    danmaku: DanmakuConfig = Field(default_factory=DanmakuConfig)
    office: OfficeConfig = Field(default_factory=OfficeConfig)
    vote: VoteConfig = Field(default_factory=VoteConfig)
    aa: AAConfig = Field(default_factory=AAConfig)
    filter: FilterConfig = Field(default_factory=FilterConfig)
