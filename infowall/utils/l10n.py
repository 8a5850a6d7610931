"""
Localisation - Dictionary of user-facing strings.

Strings come from the [l10n] settings section and may contain
"@name" placeholders that get() replaces.
"""

from loguru import logger


class Dictionary:
    """Class-level store of localised strings."""

    _texts: dict[str, str] = {}

    @classmethod
    def fill(cls, texts: dict) -> None:
        """Replace the stored strings."""
        cls._texts = {str(key): str(value) for key, value in (texts or {}).items()}

    @classmethod
    def get(cls, key: str, **replacements) -> str:
        """
        Look up a string and substitute placeholders.

        Example:
            Dictionary.get("list_changed", visible=3, total=10)
            -> "List changed. Showing 3 of 10 items."

        Returns:
            The localised string, or "" if the key is unknown
        """
        text = cls._texts.get(key)
        if text is None:
            logger.warning(f"Missing localisation string '{key}'")
            return ""

        for name, value in replacements.items():
            text = text.replace(f"@{name}", str(value))
        return text
