"""Data structures for locale negotiation and message lookup."""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple, Union

from langpick.core.config import DEFAULT_SYNONYMS

# One locale's messages: key -> text, or key -> pre-split plural forms
MessageValue = Union[str, List[str]]
MessageMapping = Mapping[str, MessageValue]


@dataclass(frozen=True)
class LanguagePreference:
    """One parsed entry of a language preference header.

    Attributes:
        tag: Language tag as written in the header (e.g., "en-GB").
        weight: Quality scaled by the parser resolution and floored.
        position: Index of the entry in the source header.
        resolution: Scale the weight was computed with.
    """

    tag: str
    weight: int
    position: int = 0
    resolution: int = 100

    @property
    def quality(self) -> float:
        """Quality as quantised by the parser; 1.0 for an entry without q."""
        return self.weight / self.resolution


@dataclass(frozen=True)
class LocaleConfiguration:
    """Immutable locale negotiation settings for one TranslationService.

    Attributes:
        language: Explicit language override, negotiated like a header.
        default_locale: Locale used when nothing else matches.
        accept_language: Preference header injected by the caller.
        available: Locales the service offers, in priority order. None or
            empty accepts any language and always yields default_locale.
        synonyms: Tag -> available locale aliases (e.g., "gb" -> "en").
        max_preferences: Maximum number of header entries considered.
    """

    language: Optional[str] = None
    default_locale: str = "en"
    accept_language: Optional[str] = None
    available: Optional[Tuple[str, ...]] = None
    synonyms: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_SYNONYMS))
    )
    max_preferences: int = 99

    def __post_init__(self):
        if self.available is not None and not isinstance(self.available, tuple):
            object.__setattr__(self, "available", tuple(self.available))
        if not isinstance(self.synonyms, MappingProxyType):
            object.__setattr__(self, "synonyms", MappingProxyType(dict(self.synonyms)))
        if self.max_preferences < 1:
            raise ValueError(
                f"max_preferences must be at least 1: {self.max_preferences}"
            )

    def replace(self, **changes) -> "LocaleConfiguration":
        """Return a copy with the given fields changed."""
        return replace(self, **changes)

    def accepts_any(self) -> bool:
        """True when no available set restricts negotiation."""
        return not self.available
