"""DASH segment URL template resolution.

Segment URLs in a DASH manifest are templates such as
``$RepresentationID$/$Number%06d$.m4s``. Only the identifiers below and
the ``%0<width>d`` format are allowed, so a small regex substitution
covers the whole grammar.
"""

import re

_TEMPLATE_RE = re.compile(r"\$(RepresentationID|Number|Bandwidth|Time|SubNumber)(?:%0(\d)d)?\$")


class SegmentTemplate:
    """Mapping of template identifiers to values.

    Usage:
        >>> template = SegmentTemplate().insert("RepresentationID", "video").insert("Number", "7")
        >>> template.resolve("$RepresentationID$/$Number%03d$.m4s")
        'video/007.m4s'
    """

    # Representation@id of the containing Representation
    REPRESENTATION_ID = "RepresentationID"
    # Segment number
    NUMBER = "Number"
    # Representation@bandwidth
    BANDWIDTH = "Bandwidth"
    # SegmentTimeline@t of the segment
    TIME = "Time"
    # Segment number within a segment sequence
    SUB_NUMBER = "SubNumber"

    def __init__(self) -> None:
        self.values: dict[str, str] = {}

    def insert(self, key: str, value: str) -> "SegmentTemplate":
        """Set the value of an identifier.

        Args:
            key: Identifier name
            value: Substituted value

        Returns:
            Self for method chaining
        """
        self.values[key] = value
        return self

    def insert_optional(self, key: str, value: str | None) -> "SegmentTemplate":
        """Set the value of an identifier when one is given."""
        if value is not None:
            self.values[key] = value
        return self

    def resolve(self, template: str) -> str:
        """Substitute every known identifier in `template`.

        Identifiers without a value, and names outside the allowed set,
        are kept verbatim.

        Args:
            template: Template string

        Returns:
            Resolved string
        """
        return _TEMPLATE_RE.sub(self._replace, template)

    def _replace(self, match: re.Match[str]) -> str:
        value = self.values.get(match.group(1))
        if value is None:
            return match.group(0)
        width = match.group(2)
        return value.rjust(int(width), "0") if width else value
