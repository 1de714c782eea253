"""Comment record model.

A CommentRecord is one chat line of a live broadcast as read from the
comment archive. Records are immutable; the converter only reads them.
"""

from dataclasses import dataclass

# User ids the platform assigns to broadcaster/system authored comments
OPERATOR_USER_IDS = frozenset({"-", "onecomme.system"})

# Premium tier of broadcaster (operator) comments in the legacy XML format
OPERATOR_PREMIUM = 3


@dataclass(frozen=True)
class CommentRecord:
    """Single danmaku comment.

    Attributes:
        content: Comment text (may contain newlines)
        user_id: Author identifier
        mail: Space separated style tokens (e.g. "shita red big")
        vpos: Timestamp in hundredths of a second since program start
        premium: Account tier code
    """

    content: str
    user_id: str = ""
    mail: str | None = None
    vpos: int | None = None
    premium: int | None = None

    @property
    def is_operator(self) -> bool:
        """Whether the comment was authored by the broadcast control account."""
        return self.user_id in OPERATOR_USER_IDS or self.premium == OPERATOR_PREMIUM

    @property
    def styles(self) -> list[str]:
        """Style tokens carried in the mail field."""
        return (self.mail or "").split(" ")
