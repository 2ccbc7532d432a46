"""Exceptions raised by the translation services."""


class TranslationError(Exception):
    """Base class for translation service errors."""


class InputError(TranslationError):
    """The request cannot be translated as given (e.g. empty source text)."""


class PersistenceError(TranslationError):
    """A translation record could not be written or read."""
