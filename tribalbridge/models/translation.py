"""Translation record model: one row per completed translation of a signed-in user."""

from datetime import datetime
from tribalbridge import db

MODEL_IDENTIFIER = 'TribalBridge-AI-v2.1'

TRANSLATION_TYPES = ('text', 'audio', 'document')


class TranslationRecord(db.Model):
    """Persisted, user-scoped log entry for one translation."""

    __tablename__ = 'translations'

    id = db.Column(db.Integer, primary_key=True)
    # Issued by the external auth service, opaque to us
    user_id = db.Column(db.String(64), nullable=False, index=True)

    source_language_code = db.Column(db.String(10), nullable=False, index=True)
    target_language_code = db.Column(db.String(10), nullable=False, index=True)
    source_text = db.Column(db.Text, nullable=False)
    translated_text = db.Column(db.Text, nullable=False)
    translation_type = db.Column(db.String(20), default='text', nullable=False)

    confidence_score = db.Column(db.Float, nullable=True)
    accuracy_score = db.Column(db.Float, nullable=True)
    efficiency_score = db.Column(db.Float, nullable=True)
    processing_time_ms = db.Column(db.Integer, default=0, nullable=False)

    character_count = db.Column(db.Integer, default=0, nullable=False)
    word_count = db.Column(db.Integer, default=0, nullable=False)
    model_used = db.Column(db.String(50), default=MODEL_IDENTIFIER, nullable=False)
    provider = db.Column(db.String(20), nullable=True)

    is_favorite = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    def to_dict(self):
        """Convert translation record to dictionary."""
        return {
            'id': self.id,
            'user_id': self.user_id,
            'source_language_code': self.source_language_code,
            'target_language_code': self.target_language_code,
            'source_text': self.source_text,
            'translated_text': self.translated_text,
            'translation_type': self.translation_type,
            'confidence_score': self.confidence_score,
            'accuracy_score': self.accuracy_score,
            'efficiency_score': self.efficiency_score,
            'processing_time_ms': self.processing_time_ms,
            'character_count': self.character_count,
            'word_count': self.word_count,
            'model_used': self.model_used,
            'provider': self.provider,
            'is_favorite': self.is_favorite,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }
