"""Danmaku to ASS conversion pipeline.

Drives the converter components over a comment stream in input order:

1. Classify each comment (drop, operator, vote control, user placement)
2. Flush the pending operator comment when the stream has moved on
3. Dispatch to the vote overlay, operator buffer or danmaku renderer
4. Render ASCII-art comments in a second pass
5. Assemble the document
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from nicoass.config.render import RenderConfig
from nicoass.core.exceptions import ConversionError
from nicoass.core.logging import get_logger
from nicoass.models.comment import CommentRecord
from nicoass.services.converter.aa import render_aa
from nicoass.services.converter.classifier import CommentKind, classify
from nicoass.services.converter.danmaku import display_text, render_fixed, render_scroll
from nicoass.services.converter.document import EventChannels, assemble
from nicoass.services.converter.lanes import ScrollLaneAllocator
from nicoass.services.converter.office import OperatorBuffer
from nicoass.services.converter.templates import ASSTemplateLoader
from nicoass.services.converter.timing import vpos_to_timestamp
from nicoass.services.converter.vote import VoteOverlay

logger = get_logger(__name__)


@dataclass
class ConversionState:
    """Mutable state of a single conversion.

    Attributes:
        channels: Collected output events
        lanes: Scroll lane allocator
        operator: Pending operator comment buffer
        vote: Vote overlay
        counts: Number of comments per classification
    """

    channels: EventChannels
    lanes: ScrollLaneAllocator
    operator: OperatorBuffer
    vote: VoteOverlay
    counts: Counter = field(default_factory=Counter)

    @classmethod
    def create(cls, config: RenderConfig) -> "ConversionState":
        return cls(
            channels=EventChannels(),
            lanes=ScrollLaneAllocator(config.danmaku, config.canvas.width),
            operator=OperatorBuffer(config),
            vote=VoteOverlay(config),
        )


class DanmakuConverter:
    """Convert a comment stream into an ASS document.

    A converter holds only configuration; every call to `convert` starts
    from fresh state, so one instance can convert any number of streams.

    Example:
        >>> converter = DanmakuConverter()
        >>> document = converter.convert([CommentRecord(content="hello", vpos=100)])
        >>> document.startswith("[Script Info]")
        True
    """

    def __init__(
        self,
        config: RenderConfig | None = None,
        template_loader: ASSTemplateLoader | None = None,
    ) -> None:
        """Initialize converter.

        Args:
            config: Rendering configuration (defaults apply when omitted)
            template_loader: ASS template loader
        """
        self.config = config or RenderConfig()
        self.template_loader = template_loader or ASSTemplateLoader()

    def convert(self, comments: Iterable[CommentRecord]) -> str:
        """Convert comments to an ASS document.

        Args:
            comments: Comments in broadcast order

        Returns:
            Complete ASS document

        Raises:
            ConversionError: If a comment cannot be converted
        """
        records = list(comments)
        state = ConversionState.create(self.config)

        try:
            for record in records:
                self._dispatch(record, state)
        except ConversionError as e:
            logger.error("Conversion failed", error=str(e), context=e.context)
            raise

        if state.operator.is_pending:
            logger.debug("Dropping trailing operator comment", vpos=state.operator.pending.vpos)
        if state.vote.is_open:
            logger.debug("Dropping unresolved poll at end of stream")

        if state.counts[CommentKind.ASCII_ART]:
            self._render_ascii_art(records, state)

        logger.info(
            "Converted comments",
            total=len(records),
            **{kind.value: count for kind, count in state.counts.items()},
        )
        return assemble(state.channels, self.config, self.template_loader)

    def _dispatch(self, record: CommentRecord, state: ConversionState) -> None:
        classification = classify(record, self.config.filter)
        state.counts[classification.kind] += 1
        if classification.dropped:
            logger.debug("Dropped comment", vpos=record.vpos, reason=classification.reason)
            return

        vpos = record.vpos or 0
        channels = state.channels

        if state.operator.should_flush(record):
            end = vpos_to_timestamp(vpos) if record.is_operator else None
            channels.office.extend(state.operator.flush(end))

        match classification.kind:
            case CommentKind.VOTE_CONTROL:
                channels.office.extend(state.vote.handle_command(record))
            case CommentKind.OPERATOR:
                if state.vote.is_open:
                    channels.office.extend(state.vote.resolve(vpos))
                else:
                    state.operator.hold(record)
            case CommentKind.FIXED:
                channels.danmaku.append(render_fixed(record, classification.style, self.config))
            case CommentKind.SCROLL:
                lane = state.lanes.allocate(vpos, len(display_text(record)))
                channels.danmaku.append(
                    render_scroll(record, classification.style, lane, self.config)
                )
            case CommentKind.ASCII_ART:
                # Rendered in the second pass
                pass

    def _render_ascii_art(self, records: list[CommentRecord], state: ConversionState) -> None:
        for record in records:
            classification = classify(record, self.config.filter)
            if classification.kind is CommentKind.ASCII_ART:
                state.channels.aa.extend(render_aa(record, classification.style, self.config))


def convert_comments(
    comments: Iterable[CommentRecord], config: RenderConfig | None = None
) -> str:
    """Convert comments to an ASS document with a one-off converter.

    Args:
        comments: Comments in broadcast order
        config: Rendering configuration

    Returns:
        Complete ASS document
    """
    return DanmakuConverter(config).convert(comments)
