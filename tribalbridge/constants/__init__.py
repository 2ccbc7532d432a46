"""Shared constants for the application."""

from tribalbridge.constants.languages import (
    ALL_LANGUAGES,
    ENDANGERMENT_STATUSES,
    get_language_by_code,
    get_language_display_name,
)
from tribalbridge.constants.dictionary import DICTIONARY_ENTRIES

__all__ = [
    'ALL_LANGUAGES',
    'ENDANGERMENT_STATUSES',
    'get_language_by_code',
    'get_language_display_name',
    'DICTIONARY_ENTRIES',
]
