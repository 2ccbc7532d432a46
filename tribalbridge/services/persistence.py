"""Persistence gateway for translation records.

Every read and write is scoped by the owning user: a record belonging to
someone else is treated exactly like a record that does not exist.
"""
import logging

from sqlalchemy.exc import SQLAlchemyError

from tribalbridge import db
from tribalbridge.models import TranslationRecord
from tribalbridge.models.translation import MODEL_IDENTIFIER
from tribalbridge.services.errors import PersistenceError

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 50
MAX_HISTORY_LIMIT = 200


def _clamp_limit(limit):
    try:
        limit = int(limit)
    except (TypeError, ValueError):
        return DEFAULT_HISTORY_LIMIT
    return max(1, min(limit, MAX_HISTORY_LIMIT))


class TranslationStore:
    """User-scoped storage of ``TranslationRecord`` rows."""

    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        return self._session or db.session

    def save(self, request, result) -> int:
        """Persist a finished translation and return the new record id."""
        record = TranslationRecord(
            user_id=str(request.user_id),
            source_language_code=request.source_language_code,
            target_language_code=request.target_language_code,
            source_text=request.source_text,
            translated_text=result.translated_text,
            translation_type=request.translation_type or 'text',
            confidence_score=result.confidence,
            accuracy_score=result.accuracy,
            efficiency_score=result.efficiency,
            processing_time_ms=result.processing_time_ms,
            character_count=len(request.source_text),
            word_count=len(request.source_text.split()),
            model_used=MODEL_IDENTIFIER,
            provider=result.provider,
        )
        try:
            self.session.add(record)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise PersistenceError(f"Could not save translation: {e}") from e
        return record.id

    def _owned_query(self, record_id, user_id):
        return self.session.query(TranslationRecord).filter_by(id=record_id, user_id=str(user_id))

    def get_for_user(self, record_id, user_id):
        """Return the record if it exists and belongs to ``user_id``."""
        return self._owned_query(record_id, user_id).first()

    def list_for_user(self, user_id, limit=DEFAULT_HISTORY_LIMIT, favorites_only=False):
        """Most recent translations of a user, newest first."""
        query = self.session.query(TranslationRecord).filter_by(user_id=str(user_id))
        if favorites_only:
            query = query.filter_by(is_favorite=True)
        return query.order_by(
            TranslationRecord.created_at.desc(),
            TranslationRecord.id.desc()
        ).limit(_clamp_limit(limit)).all()

    def list_favorites(self, user_id, limit=DEFAULT_HISTORY_LIMIT):
        return self.list_for_user(user_id, limit, favorites_only=True)

    def delete(self, record_id, user_id) -> bool:
        """Delete a record owned by ``user_id``. False if missing or not owned."""
        record = self.get_for_user(record_id, user_id)
        if not record:
            return False
        try:
            self.session.delete(record)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Error deleting translation {record_id}: {e}")
            return False
        return True

    def toggle_favorite(self, record_id, user_id) -> bool:
        """Flip ``is_favorite`` on a record owned by ``user_id``. False if missing or not owned."""
        record = self.get_for_user(record_id, user_id)
        if not record:
            return False
        try:
            record.is_favorite = not record.is_favorite
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Error toggling favorite on translation {record_id}: {e}")
            return False
        return True
