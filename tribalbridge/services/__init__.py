"""Translation services: providers, dictionary fallback, orchestration, storage."""

from tribalbridge.services.errors import TranslationError, InputError, PersistenceError
from tribalbridge.services.translation import (
    TranslationRequest,
    TranslationResult,
    TranslationService,
    build_translation_service,
)

__all__ = [
    'TranslationError',
    'InputError',
    'PersistenceError',
    'TranslationRequest',
    'TranslationResult',
    'TranslationService',
    'build_translation_service',
]
