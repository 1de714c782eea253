"""Data models."""

from nicoass.models.comment import OPERATOR_PREMIUM, OPERATOR_USER_IDS, CommentRecord

__all__ = [
    "OPERATOR_PREMIUM",
    "OPERATOR_USER_IDS",
    "CommentRecord",
]
