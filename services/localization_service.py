"""
services/localization_service.py
--------------------------------
Looks up user-facing strings by key and language code.
"""

from config import DEFAULT_LANGUAGE
from utils.logger import get_logger
from utils.strings import LANGUAGE_LABELS, STRINGS

logger = get_logger(__name__)


class LocalizationService:
    """
    Serves strings from per-language tables.

    Lookups for an unknown language or a key missing from a language's
    table fall back to the default language. A key missing from the
    default table as well is a programming error and raises KeyError.
    """

    def __init__(
        self,
        strings: dict[str, dict[str, str]] | None = None,
        labels: dict[str, str] | None = None,
        default_language: str = DEFAULT_LANGUAGE,
    ):
        self._strings = strings if strings is not None else STRINGS
        self._labels = labels if labels is not None else LANGUAGE_LABELS
        self.default_language = default_language

    @property
    def supported_languages(self) -> dict[str, str]:
        """Language code -> label, in keyboard order."""
        return dict(self._labels)

    def is_supported(self, language: str) -> bool:
        return language in self._labels

    def get_string(self, key: str, language: str, *args) -> str:
        """
        Return the string `key` in `language`, formatted with `args`.

        Args:
            key: String table key, e.g. "wrong_file_id".
            language: Language code; unknown codes use the default language.
            *args: Positional values for `{0}`, `{1}`... placeholders.
        """
        table = self._strings.get(language, {})
        template = table.get(key)
        if template is None:
            if language in self._strings:
                logger.warning(f"Missing string '{key}' for language '{language}'")
            template = self._strings[self.default_language][key]
        return template.format(*args) if args else template
