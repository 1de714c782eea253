"""Exception hierarchy for nicoass.

Everything raised on purpose derives from `NicoAssError`, so the CLI can
catch one type and log it. Each error carries a ``context`` dict that is
passed to structlog as-is.
"""

from typing import Any


def _merge(context: dict[str, Any] | None, **fields: Any) -> dict[str, Any]:
    merged = dict(context or {})
    merged.update({key: value for key, value in fields.items() if value is not None})
    return merged


class NicoAssError(Exception):
    """Root of all nicoass errors.

    Example:
        >>> err = NicoAssError("Lane table corrupt", context={"vpos": 1200})
        >>> err.with_context(lane=4).to_dict()["context"]
        {'vpos': 1200, 'lane': 4}
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        self.context = context or {}
        super().__init__(message)

    def with_context(self, **kwargs: Any) -> "NicoAssError":
        """Attach more fields and return the same error."""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Flatten into keyword arguments for a log call."""
        return {
            "error_type": type(self).__name__,
            "message": str(self),
            "context": self.context,
        }


class ConfigError(NicoAssError):
    """A rendering configuration file could not be used."""

    def __init__(
        self,
        message: str,
        config_path: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context=_merge(context, config_path=config_path or None))


class ConfigValidationError(ConfigError):
    """Configuration values were rejected by the RenderConfig schema."""


class ConfigNotFoundError(ConfigError):
    """The named configuration file does not exist."""

    def __init__(
        self,
        config_key: str,
        config_path: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.config_key = config_key
        super().__init__(
            f"Configuration '{config_key}' not found",
            config_path=config_path,
            context=_merge(context, config_key=config_key),
        )


class ConversionError(NicoAssError):
    """Turning comments into events failed.

    A conversion either returns the whole document or raises one of these;
    ``vpos`` points at the comment being processed.
    """

    def __init__(
        self,
        message: str,
        vpos: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.vpos = vpos
        super().__init__(message, context=_merge(context, vpos=vpos))


class VoteCommandError(ConversionError):
    """A ``/vote`` command is malformed.

    Missing options or results, unbalanced quotes and non-numeric result
    values all end up here. ``command`` holds the raw comment text.
    """

    def __init__(
        self,
        message: str,
        command: str,
        vpos: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.command = command
        super().__init__(message, vpos=vpos, context=_merge(context, command=command))


class CommentSourceError(NicoAssError):
    """A comment archive could not be read or parsed."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.source = source
        super().__init__(message, context=_merge(context, source=source or None))
