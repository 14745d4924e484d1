"""Custom exceptions for the localization engine.

Missing keys are not exceptions: they are reported as ``KeyNotFound`` values
(see ``localization.i18n.models``) and absorbed by the fallback chain.
"""

from typing import Optional


class I18nError(Exception):
    """Base exception for all localization errors.

    Example:
        try:
            service.set_language("de")
        except I18nError as e:
            logger.error("language_switch_failed", error=str(e))
    """

    pass


class SourceNotFoundError(I18nError, LookupError):
    """Raised when the source document for a language code does not exist.

    Example:
        >>> reader.read("xx")
        Traceback (most recent call last):
        ...
        SourceNotFoundError: No translation source found for language 'xx'
    """

    def __init__(self, code: str, location: Optional[str] = None):
        self.code = code
        self.location = location
        message = f"No translation source found for language '{code}'"
        if location:
            message = f"{message} at {location}"
        super().__init__(message)


class MalformedSourceError(I18nError, ValueError):
    """Raised when a source document violates the leaf/branch schema.

    ``path`` is the dotted key path of the offending node. An empty path
    designates the document root (unparseable text, or a root that is not an
    object).

    Example:
        >>> parser.parse("de", '{"nav": {"count": 3}}')
        Traceback (most recent call last):
        ...
        MalformedSourceError: Malformed translation source for 'de' at 'nav.count': expected string or object, got int
    """

    def __init__(self, code: str, path: str, reason: str):
        self.code = code
        self.path = path
        self.reason = reason
        where = f"'{path}'" if path else "document root"
        super().__init__(f"Malformed translation source for '{code}' at {where}: {reason}")


class NotInitializedError(I18nError, RuntimeError):
    """Raised when a service operation is called before a successful ``init``.

    Example:
        >>> LocalizationService(store).resolve("nav.dashboard")
        Traceback (most recent call last):
        ...
        NotInitializedError: LocalizationService.resolve() called before init()
    """

    pass
