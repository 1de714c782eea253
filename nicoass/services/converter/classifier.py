"""Comment classification.

Decides, per comment, which channel of the document it feeds. This is a
pure function of the record and the filter configuration.
"""

from dataclasses import dataclass, field
from enum import Enum

from nicoass.config.render import FilterConfig
from nicoass.models.comment import CommentRecord
from nicoass.services.converter.style import Placement, StyleResolution, resolve_style

VOTE_PREFIX = "/vote"


class CommentKind(str, Enum):
    """Classification of a comment."""

    DROPPED = "dropped"
    OPERATOR = "operator"
    VOTE_CONTROL = "vote_control"
    FIXED = "fixed"
    SCROLL = "scroll"
    ASCII_ART = "ascii_art"


class DropReason(str, Enum):
    """Why a comment was dropped."""

    NO_TIMESTAMP = "no_timestamp"
    NG_WORD = "ng_word"
    SUPPRESSED_PREMIUM = "suppressed_premium"


@dataclass(frozen=True)
class Classification:
    """Result of classifying one comment.

    Attributes:
        kind: Channel the comment feeds
        style: Resolved style (user comments only)
        reason: Why the comment was dropped (dropped comments only)
    """

    kind: CommentKind
    style: StyleResolution = field(default_factory=StyleResolution)
    reason: DropReason | None = None

    @property
    def dropped(self) -> bool:
        return self.kind is CommentKind.DROPPED

    @property
    def placement(self) -> Placement:
        return self.style.placement


_PLACEMENT_KINDS: dict[Placement, CommentKind] = {
    Placement.ASCII_ART: CommentKind.ASCII_ART,
    Placement.TOP: CommentKind.FIXED,
    Placement.BOTTOM: CommentKind.FIXED,
    Placement.SCROLL: CommentKind.SCROLL,
}


def is_blocked(record: CommentRecord, config: FilterConfig) -> DropReason | None:
    """Check a comment against the blocklist and the suppressed tier.

    Args:
        record: Comment to check
        config: Filter configuration

    Returns:
        The reason the comment is blocked, or None
    """
    if any(word in record.content for word in config.ng_words):
        return DropReason.NG_WORD
    if config.suppressed_premium is not None and record.premium == config.suppressed_premium:
        return DropReason.SUPPRESSED_PREMIUM
    return None


def classify(record: CommentRecord, config: FilterConfig | None = None) -> Classification:
    """Classify a comment.

    Args:
        record: Comment to classify
        config: Filter configuration (defaults apply when omitted)

    Returns:
        Classification of the comment
    """
    config = config or FilterConfig()

    if record.vpos is None:
        return Classification(kind=CommentKind.DROPPED, reason=DropReason.NO_TIMESTAMP)

    reason = is_blocked(record, config)
    if reason is not None:
        return Classification(kind=CommentKind.DROPPED, reason=reason)

    if record.is_operator:
        if record.content.startswith(VOTE_PREFIX):
            return Classification(kind=CommentKind.VOTE_CONTROL)
        return Classification(kind=CommentKind.OPERATOR)

    style = resolve_style(record.styles)
    return Classification(kind=_PLACEMENT_KINDS[style.placement], style=style)
