"""Rendering configuration models."""

from nicoass.config.render import (
    DEFAULT_NG_WORDS,
    AAConfig,
    CanvasConfig,
    DanmakuConfig,
    FilterConfig,
    OfficeConfig,
    RenderConfig,
    VoteConfig,
)

__all__ = [
    "DEFAULT_NG_WORDS",
    "AAConfig",
    "CanvasConfig",
    "DanmakuConfig",
    "FilterConfig",
    "OfficeConfig",
    "RenderConfig",
    "VoteConfig",
]
