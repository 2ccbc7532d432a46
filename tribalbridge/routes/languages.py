"""Language catalog routes."""

from flask import Blueprint, request, jsonify
from tribalbridge.constants.languages import (
    ALL_LANGUAGES,
    get_language_by_code,
    get_languages_by_region,
    get_major_languages,
    get_tribal_languages,
    search_languages,
)
from tribalbridge.services.analytics import get_language_stats

languages_bp = Blueprint('languages', __name__)


@languages_bp.route('', methods=['GET'])
def get_languages():
    """List catalog languages.

    Query params:
    - type: 'tribal' or 'major' (default: all)
    - region: exact region name, case-insensitive
    - q: substring search on name / native name
    """
    language_type = request.args.get('type')
    region = request.args.get('region')
    query = request.args.get('q')

    if query:
        languages = search_languages(query)
    elif region:
        languages = get_languages_by_region(region)
    elif language_type == 'tribal':
        languages = get_tribal_languages()
    elif language_type == 'major':
        languages = get_major_languages()
    elif language_type:
        return jsonify({'error': 'Invalid type. Must be tribal or major'}), 400
    else:
        languages = sorted((dict(lang) for lang in ALL_LANGUAGES), key=lambda lang: lang['name'])

    return jsonify({
        'languages': languages,
        'total': len(languages)
    }), 200


@languages_bp.route('/<code>', methods=['GET'])
def get_language(code):
    language = get_language_by_code(code)
    if not language:
        return jsonify({'error': 'Language not found'}), 404
    return jsonify(language), 200


@languages_bp.route('/<code>/stats', methods=['GET'])
def get_language_statistics(code):
    """Translation volume and accuracy for one language."""
    return jsonify(get_language_stats(code)), 200
