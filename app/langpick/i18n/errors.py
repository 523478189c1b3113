"""Exceptions raised by the i18n system.

Missing keys, unavailable locales and malformed header entries are not errors:
they degrade to the key itself, an empty mapping and a zero weight. Only
caller bugs surface as exceptions.
"""

from typing import Optional


class TranslationError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            service.translate("%s of %s", "one")
        except TranslationError as e:
            logger.error("translation_error", error=str(e))
    """

    pass


class FormattingError(TranslationError, ValueError):
    """Raised when a template cannot be rendered with the given arguments.

    Example:
        >>> render("%s of %s", ["one"])
        Traceback (most recent call last):
        ...
        FormattingError: Template '%s of %s' expects 2 arguments, got 1

    Attributes:
        template: The template that failed to render.
        expected: Number of arguments the template consumes, if known.
        received: Number of arguments supplied, if known.
    """

    def __init__(
        self,
        message: str,
        template: str = "",
        expected: Optional[int] = None,
        received: Optional[int] = None,
    ):
        super().__init__(message)
        self.template = template
        self.expected = expected
        self.received = received


class MessageNotFoundError(TranslationError, KeyError):
    """Raised by keyed message stores when a key has no translation.

    The catalog converts this into a lookup miss.
    """

    def __init__(self, key: str, locale: Optional[str] = None):
        super().__init__(key)
        self.key = key
        self.locale = locale

    def __str__(self) -> str:
        if self.locale:
            return f"Message {self.key!r} not found for locale {self.locale}"
        return f"Message {self.key!r} not found"
