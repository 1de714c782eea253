"""Danmaku to ASS subtitle converter.

Components:
- classifier: Decide which channel a comment feeds
- style: Resolve color and placement tokens
- lanes: Scroll lane allocation
- office: Operator comment buffering
- vote: Poll overlay
- aa: ASCII-art rendering
- document: ASS document assembly
- pipeline: DanmakuConverter driving all of the above
"""

from nicoass.services.converter.classifier import (
    Classification,
    CommentKind,
    DropReason,
    classify,
)
from nicoass.services.converter.document import EventChannels, assemble, default_styles
from nicoass.services.converter.lanes import ScrollLaneAllocator
from nicoass.services.converter.office import OperatorBuffer, PendingOperatorComment
from nicoass.services.converter.pipeline import (
    ConversionState,
    DanmakuConverter,
    convert_comments,
)
from nicoass.services.converter.style import (
    COLOR_MAP,
    Placement,
    StyleResolution,
    ass_color,
    resolve_style,
)
from nicoass.services.converter.timing import format_timestamp, vpos_to_timestamp
from nicoass.services.converter.vote import VoteCell, VoteOverlay, layout, wrap_option_text

__all__ = [
    "COLOR_MAP",
    "Classification",
    "CommentKind",
    "ConversionState",
    "DanmakuConverter",
    "DropReason",
    "EventChannels",
    "OperatorBuffer",
    "PendingOperatorComment",
    "Placement",
    "ScrollLaneAllocator",
    "StyleResolution",
    "VoteCell",
    "VoteOverlay",
    "ass_color",
    "assemble",
    "classify",
    "convert_comments",
    "default_styles",
    "format_timestamp",
    "layout",
    "resolve_style",
    "vpos_to_timestamp",
    "wrap_option_text",
]
