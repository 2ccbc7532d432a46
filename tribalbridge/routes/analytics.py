"""Dashboard analytics routes (read-only)."""

from flask import Blueprint, jsonify
from tribalbridge.services.analytics import get_global_stats, get_user_stats
from tribalbridge.utils import token_required

analytics_bp = Blueprint('analytics', __name__)


@analytics_bp.route('/me', methods=['GET'])
@token_required
def my_stats(current_user_id):
    return jsonify(get_user_stats(current_user_id)), 200


@analytics_bp.route('/global', methods=['GET'])
def global_stats():
    return jsonify(get_global_stats()), 200
