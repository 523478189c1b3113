"""Locale resolution from language preference headers.

Parses weighted Accept-Language style headers and negotiates them against the
locales a service declares as available.
"""

import math
import re
from typing import List, Mapping, Optional, Sequence

from langpick.core.logging import get_module_logger
from langpick.i18n.models import LanguagePreference, LocaleConfiguration

logger = get_module_logger()

_NUMERIC = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def accept_language_from_headers(headers: Optional[Mapping[str, str]]) -> Optional[str]:
    """Extract the Accept-Language value from a request header mapping.

    Accepts plain header mappings (any case) and WSGI environ dictionaries
    (``HTTP_ACCEPT_LANGUAGE``).

    Args:
        headers: Request headers or WSGI environ, or None.

    Returns:
        Header value, or None if absent or empty.
    """
    if not headers:
        return None
    for name, value in headers.items():
        normalized = name.lower().replace("_", "-")
        if normalized in ("accept-language", "http-accept-language") and value:
            return value
    return None


class HeaderParser:
    """Parses language preference headers into ordered preferences.

    Qualities are quantised to integers with ``resolution`` steps. Entries are
    sorted by weight, highest first; equal weights keep header order. Blank
    entries of a non-empty header are kept as empty tags.

    Example:
        parser = HeaderParser()
        parser.detect_languages("da, en-gb;q=0.8, en;q=0.7")
        # ["da", "en-gb", "en"]
    """

    def __init__(self, resolution: int = 100, max_preferences: int = 99):
        self.resolution = resolution
        self.max_preferences = max_preferences

    def parse(self, header: Optional[str]) -> List[LanguagePreference]:
        """Parse a header into weighted preferences.

        Args:
            header: Raw header value (e.g., "ru,en-US;q=0.8,en;q=0.6").

        Returns:
            Preferences ordered by descending weight, at most max_preferences.
        """
        if not header:
            return []

        preferences = []
        for position, entry in enumerate(header.split(",")):
            tag, _, params = (part.strip() for part in entry.partition(";"))
            preferences.append(
                LanguagePreference(
                    tag=tag,
                    weight=self._weight(params, tag),
                    position=position,
                    resolution=self.resolution,
                )
            )

        # sorted() is stable with reverse=True, ties keep header order
        preferences = sorted(preferences, key=lambda p: p.weight, reverse=True)
        return preferences[: self.max_preferences]

    def detect_languages(self, header: Optional[str]) -> List[str]:
        """Parse a header and return only the tags, best first."""
        return [preference.tag for preference in self.parse(header)]

    def _weight(self, params: str, tag: str) -> int:
        if not params:
            return self.resolution

        _, _, value = (part.strip() for part in params.partition("="))
        if not _NUMERIC.match(value):
            logger.debug("malformed_quality", tag=tag, params=params)
            return 0

        scaled = float(value) * self.resolution
        if not math.isfinite(scaled):
            logger.debug("malformed_quality", tag=tag, params=params)
            return 0
        return math.floor(scaled)


class LocaleResolver:
    """Negotiates a locale from ordered language tags.

    Candidates are tried strictly in preference order. For each candidate the
    available locales are scanned in configuration order and the first one
    matching the full tag, its synonym, the short tag or the short tag's
    synonym wins. A lower-priority exact match therefore never beats an
    earlier candidate's short-tag match.

    Falls back to the default locale when nothing matches or when the
    configuration accepts any language.
    """

    def __init__(self, config: LocaleConfiguration):
        self.config = config
        self.parser = HeaderParser(max_preferences=config.max_preferences)
        self.log = logger.bind(default_locale=config.default_locale)

    @staticmethod
    def short_code(tag: str) -> str:
        """Strip region and script subtags (e.g., "en-US" -> "en").

        Tags of two characters or less are returned unchanged. A dash takes
        precedence over an underscore.
        """
        if len(tag) > 2:
            dash = tag.find("-")
            if dash > 0:
                return tag[:dash]
            underscore = tag.find("_")
            if underscore > 0:
                return tag[:underscore]
        return tag

    def best_match(self, tags: Sequence[str]) -> str:
        """Return the first available locale matching the ordered tags.

        Args:
            tags: Language tags, most preferred first.

        Returns:
            Matching available locale, or the default locale.
        """
        if self.config.accepts_any():
            return self.config.default_locale

        synonyms = self.config.synonyms
        for tag in tags:
            short = self.short_code(tag)
            for available in self.config.available:
                if tag == available or synonyms.get(tag) == available:
                    return available
                if short == available or synonyms.get(short) == available:
                    return available

        self.log.debug("no_matching_locale", tags=list(tags))
        return self.config.default_locale

    def resolve(self, header: Optional[str]) -> str:
        """Parse a preference header and negotiate it."""
        locale = self.best_match(self.parser.detect_languages(header))
        self.log.debug("resolved_from_header", header=header, locale=locale)
        return locale

    def preference_source(
        self, request_headers: Optional[Mapping[str, str]] = None
    ) -> str:
        """Pick the raw preference string to negotiate.

        Priority: explicit language, injected accept-language, the request's
        Accept-Language header, then the default locale.
        """
        if self.config.language:
            return self.config.language
        if self.config.accept_language:
            return self.config.accept_language
        header = accept_language_from_headers(request_headers)
        if header:
            return header
        return self.config.default_locale
