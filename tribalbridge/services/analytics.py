"""Read-only statistics built by scanning persisted translation records.

None of this runs on the translation hot path. Every function tolerates an
empty record set and returns zeroed stats rather than raising.
"""
import logging
from collections import Counter
from datetime import datetime, timedelta

from sqlalchemy import func, or_
from sqlalchemy.exc import SQLAlchemyError

from tribalbridge import db
from tribalbridge.constants.languages import ALL_LANGUAGES, get_language_by_code
from tribalbridge.models import TranslationRecord, TranslationFeedback
from tribalbridge.models.feedback import FEEDBACK_TYPES

logger = logging.getLogger(__name__)

RECENT_ACTIVITY_DAYS = 30
TOP_PAIRS_LIMIT = 5


def _average(values):
    values = [v for v in values if v]
    return sum(values) / len(values) if values else 0


def aggregate_activity_by_date(records):
    """Count records per calendar day, ascending by date."""
    counts = Counter(r.created_at.date().isoformat() for r in records if r.created_at)
    return [{'date': day, 'count': counts[day]} for day in sorted(counts)]


def get_user_stats(user_id, now=None):
    """Per-user rollup: volume, accuracy, languages and recent activity."""
    now = now or datetime.utcnow()
    try:
        records = TranslationRecord.query.filter_by(user_id=str(user_id)).all()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching user stats: {e}")
        records = []

    languages_used = set()
    for r in records:
        languages_used.add(r.source_language_code)
        languages_used.add(r.target_language_code)

    cutoff = now - timedelta(days=RECENT_ACTIVITY_DAYS)
    recent = [r for r in records if r.created_at and r.created_at >= cutoff]

    return {
        'translation_count': len(records),
        'favorite_count': sum(1 for r in records if r.is_favorite),
        'total_characters_translated': sum(r.character_count or 0 for r in records),
        'average_accuracy': _average(r.accuracy_score for r in records),
        'languages_used': sorted(languages_used),
        'recent_activity': aggregate_activity_by_date(recent),
    }


def get_language_stats(code):
    """Per-language rollup over translations where ``code`` is source or target."""
    language = get_language_by_code(code)
    try:
        records = TranslationRecord.query.filter(
            or_(
                TranslationRecord.source_language_code == code,
                TranslationRecord.target_language_code == code
            )
        ).all()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching language stats: {e}")
        records = []

    pair_counts = Counter((r.source_language_code, r.target_language_code) for r in records)
    # Ties keep first-seen order (Counter.most_common is stable)
    most_common_pairs = [
        {'source': source, 'target': target, 'count': count}
        for (source, target), count in pair_counts.most_common(TOP_PAIRS_LIMIT)
    ]

    return {
        'code': code,
        'name': language['name'] if language else code,
        'translation_count': len(records),
        'average_accuracy': _average(r.accuracy_score for r in records),
        'most_common_pairs': most_common_pairs,
    }


def get_global_stats():
    try:
        total_translations = db.session.query(func.count(TranslationRecord.id)).scalar() or 0
        total_users = db.session.query(func.count(func.distinct(TranslationRecord.user_id))).scalar() or 0
    except SQLAlchemyError as e:
        logger.error(f"Error fetching global stats: {e}")
        total_translations = total_users = 0

    return {
        'total_translations': total_translations,
        'total_users': total_users,
        'total_languages': len(ALL_LANGUAGES),
    }


def add_translation_feedback(translation_id, user_id, feedback_type, rating, comment=None):
    """Attach feedback to one of the caller's own translations.

    Returns False if the translation does not exist, is not owned by
    ``user_id``, the input is invalid, or the write fails.
    """
    if feedback_type not in FEEDBACK_TYPES:
        return False
    if not isinstance(rating, int) or isinstance(rating, bool) or not 1 <= rating <= 5:
        return False

    record = TranslationRecord.query.filter_by(id=translation_id, user_id=str(user_id)).first()
    if not record:
        return False

    try:
        feedback = TranslationFeedback(
            translation_id=record.id,
            user_id=str(user_id),
            feedback_type=feedback_type,
            rating=rating,
            comment=comment
        )
        db.session.add(feedback)
        db.session.commit()
        return True
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Error adding feedback: {e}")
        return False
