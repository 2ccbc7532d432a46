"""Translate endpoint: the HTTP entry point of the translation pipeline."""

from flask import Blueprint, request, jsonify, current_app
from tribalbridge import db, limiter
from tribalbridge.models.translation import TRANSLATION_TYPES
from tribalbridge.services import InputError, TranslationRequest
from tribalbridge.utils import token_optional

translate_bp = Blueprint('translate', __name__)

MAX_SOURCE_TEXT_LENGTH = 5000


def get_translation_service():
    return current_app.extensions['translation_service']


def _validate_translate_data(data):
    """Validate the translate payload. Returns error message or None."""
    for field in ('source_language_code', 'target_language_code', 'source_text'):
        if not isinstance(data.get(field), str):
            return f"{field} is required"

    if not data['source_language_code'].strip() or not data['target_language_code'].strip():
        return "Language codes must not be empty"

    if data['source_language_code'].strip() == data['target_language_code'].strip():
        return "Source and target languages must be different"

    if len(data['source_text']) > MAX_SOURCE_TEXT_LENGTH:
        return f"source_text must be at most {MAX_SOURCE_TEXT_LENGTH} characters"

    translation_type = data.get('translation_type', 'text')
    if translation_type not in TRANSLATION_TYPES:
        return f"translation_type must be one of: {', '.join(TRANSLATION_TYPES)}"

    return None


@translate_bp.route('', methods=['POST'])
@limiter.limit("30 per minute")
@token_optional
def translate(current_user_id):
    """Translate text. Signed-in callers get the result saved to their history."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return jsonify({'error': 'Request body must be a JSON object'}), 400

    error = _validate_translate_data(data)
    if error:
        return jsonify({'error': error}), 400

    translation_request = TranslationRequest(
        source_language_code=data['source_language_code'].strip(),
        target_language_code=data['target_language_code'].strip(),
        source_text=data['source_text'],
        user_id=current_user_id,
        translation_type=data.get('translation_type', 'text'),
    )

    try:
        result = get_translation_service().translate(translation_request)
    except InputError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        db.session.rollback()
        return jsonify({'error': str(e)}), 500

    return jsonify(result.to_dict()), 200


@translate_bp.route('/pairs', methods=['GET'])
def get_dictionary_pairs():
    """Language pairs covered by the built-in dictionary."""
    table = get_translation_service().dictionary.table
    pairs = [{'source': source, 'target': target} for source, target in table.supported_pairs()]
    return jsonify({'pairs': pairs, 'total': len(pairs)}), 200
