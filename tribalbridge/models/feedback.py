"""Feedback left by a user on one of their own translations."""

from datetime import datetime
from tribalbridge import db

FEEDBACK_TYPES = ('accuracy', 'cultural_appropriateness', 'technical_issue')


class TranslationFeedback(db.Model):

    __tablename__ = 'translation_feedback'

    id = db.Column(db.Integer, primary_key=True)
    translation_id = db.Column(db.Integer, db.ForeignKey('translations.id', ondelete='CASCADE'), nullable=False, index=True)
    user_id = db.Column(db.String(64), nullable=False, index=True)
    feedback_type = db.Column(db.String(30), nullable=False)
    rating = db.Column(db.Integer, nullable=False)  # 1-5
    comment = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    translation = db.relationship(
        'TranslationRecord',
        backref=db.backref('feedback', cascade='all, delete-orphan')
    )

    def to_dict(self):
        return {
            'id': self.id,
            'translation_id': self.translation_id,
            'user_id': self.user_id,
            'feedback_type': self.feedback_type,
            'rating': self.rating,
            'comment': self.comment,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }
