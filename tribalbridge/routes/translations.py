"""Translation history routes: list, delete, favorite and feedback.

All endpoints are scoped to the caller. A translation owned by someone else
gets the same 404 as one that does not exist.
"""

from flask import Blueprint, request, jsonify
from tribalbridge import db
from tribalbridge.services.analytics import add_translation_feedback
from tribalbridge.services.persistence import TranslationStore, DEFAULT_HISTORY_LIMIT
from tribalbridge.utils import token_required

translations_bp = Blueprint('translations', __name__)

store = TranslationStore()


@translations_bp.route('', methods=['GET'])
@token_required
def get_history(current_user_id):
    """Get the caller's translation history, newest first.

    Query params:
    - limit: max records (default: 50, max: 200)
    - favorites: 'true' to only return favorites
    """
    limit = request.args.get('limit', DEFAULT_HISTORY_LIMIT, type=int)
    favorites_only = request.args.get('favorites', 'false').lower() in ('true', '1', 'yes')

    records = store.list_for_user(current_user_id, limit, favorites_only=favorites_only)

    return jsonify({
        'translations': [record.to_dict() for record in records],
        'total': len(records)
    }), 200


@translations_bp.route('/<int:translation_id>', methods=['GET'])
@token_required
def get_translation(current_user_id, translation_id):
    record = store.get_for_user(translation_id, current_user_id)
    if not record:
        return jsonify({'error': 'Translation not found'}), 404
    return jsonify(record.to_dict()), 200


@translations_bp.route('/<int:translation_id>', methods=['DELETE'])
@token_required
def delete_translation(current_user_id, translation_id):
    """Delete one of the caller's translations."""
    try:
        if not store.delete(translation_id, current_user_id):
            return jsonify({'error': 'Translation not found'}), 404

        return jsonify({'message': 'Translation deleted successfully'}), 200
    except Exception as e:
        db.session.rollback()
        return jsonify({'error': str(e)}), 500


@translations_bp.route('/<int:translation_id>/favorite', methods=['POST'])
@token_required
def toggle_favorite(current_user_id, translation_id):
    """Toggle favorite status (add if not favorited, remove if already favorited)."""
    try:
        if not store.toggle_favorite(translation_id, current_user_id):
            return jsonify({'error': 'Translation not found'}), 404

        record = store.get_for_user(translation_id, current_user_id)
        return jsonify({
            'is_favorite': record.is_favorite,
            'message': 'Added to favorites' if record.is_favorite else 'Removed from favorites'
        }), 200
    except Exception as e:
        db.session.rollback()
        return jsonify({'error': str(e)}), 500


@translations_bp.route('/<int:translation_id>/feedback', methods=['POST'])
@token_required
def post_feedback(current_user_id, translation_id):
    """Leave feedback on one of the caller's translations.

    Body: feedback_type (accuracy | cultural_appropriateness | technical_issue),
    rating (1-5), comment (optional).
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'feedback_type' not in data or 'rating' not in data:
        return jsonify({'error': 'feedback_type and rating are required'}), 400

    comment = data.get('comment')
    if comment is not None and (not isinstance(comment, str) or len(comment) > 1000):
        return jsonify({'error': 'comment must be a string under 1000 characters'}), 400

    try:
        if store.get_for_user(translation_id, current_user_id) is None:
            return jsonify({'error': 'Translation not found'}), 404

        if not add_translation_feedback(translation_id, current_user_id, data['feedback_type'], data['rating'], comment):
            return jsonify({'error': 'Invalid feedback'}), 400

        return jsonify({'message': 'Feedback recorded'}), 201
    except Exception as e:
        db.session.rollback()
        return jsonify({'error': str(e)}), 500
