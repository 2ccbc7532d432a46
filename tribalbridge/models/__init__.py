"""Database models for the translation service."""

from .translation import TranslationRecord
from .feedback import TranslationFeedback

__all__ = ['TranslationRecord', 'TranslationFeedback']
