"""Message catalogs for user facing strings.

Catalogs are flat YAML mappings from message key to text, one file per
locale under ``locales/``. Messages may contain ``$name`` placeholders.

Lookup order: requested locale, then English, then the key itself.

Usage:
    >>> fl("cli-input-help")
    'Comment archive in XML format'
    >>> fl("cli-converted", count=3, path="out.ass")
    'Wrote 3 comments to out.ass'
"""

from pathlib import Path
from string import Template
from typing import Any

import yaml

from nicoass.core.config import get_config
from nicoass.core.logging import get_logger

logger = get_logger(__name__)

LOCALES_DIR = Path(__file__).parent / "locales"
FALLBACK_LOCALE = "en"


class MessageCatalog:
    """Loads and caches YAML message catalogs."""

    def __init__(self, locales_dir: Path | None = None):
        """Initialize catalog.

        Args:
            locales_dir: Directory containing ``<locale>.yaml`` files
        """
        self.locales_dir = locales_dir or LOCALES_DIR
        self._cache: dict[str, dict[str, str]] = {}

    def load(self, locale: str) -> dict[str, str]:
        """Load the messages of one locale.

        Args:
            locale: Locale name (e.g. "en", "zh-CN")

        Returns:
            Mapping of key to message (empty if the locale is unknown)
        """
        if locale in self._cache:
            return self._cache[locale]

        path = self.locales_dir / f"{locale}.yaml"
        messages: dict[str, str] = {}
        if path.exists():
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            messages = {str(key): str(value) for key, value in data.items()}
        else:
            logger.debug("Unknown locale", locale=locale)

        self._cache[locale] = messages
        return messages

    def get(self, key: str, locale: str | None = None, **kwargs: Any) -> str:
        """Look up and render a message.

        Args:
            key: Message key
            locale: Locale name (defaults to the configured locale)
            **kwargs: Placeholder values

        Returns:
            Rendered message, or the key itself if no catalog has it
        """
        locale = locale or get_config().locale
        message = self.load(locale).get(key)
        if message is None:
            message = self.load(FALLBACK_LOCALE).get(key, key)
        return Template(message).safe_substitute(**kwargs)


_catalog = MessageCatalog()


def fl(key: str, **kwargs: Any) -> str:
    """Localized message for `key` in the configured locale.

    Args:
        key: Message key
        **kwargs: Placeholder values

    Returns:
        Rendered message
    """
    return _catalog.get(key, **kwargs)


__all__ = [
    "FALLBACK_LOCALE",
    "MessageCatalog",
    "fl",
]
