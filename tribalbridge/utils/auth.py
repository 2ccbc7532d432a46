"""Shared authentication utilities.

Tokens are issued by the external auth service; this module only verifies
them. A token is an HS256 JWT whose ``user_id`` claim (or ``sub`` as a
fallback) identifies the caller.
"""

from functools import wraps
from flask import request, jsonify, current_app
import jwt


def _get_secret_key():
    """Get JWT secret from Flask app config (single source of truth)."""
    return current_app.config['JWT_SECRET_KEY']


def _extract_token():
    auth_header = request.headers.get('Authorization')
    if not auth_header:
        return None
    # Support both "Bearer <token>" and raw token formats
    return auth_header.split(' ')[1] if ' ' in auth_header else auth_header


def decode_user_id(token):
    """Return the user id carried by ``token``. Raises jwt.InvalidTokenError."""
    payload = jwt.decode(token, _get_secret_key(), algorithms=['HS256'])
    user_id = payload.get('user_id') or payload.get('sub')
    if not user_id:
        raise jwt.InvalidTokenError('Token has no user id')
    return str(user_id)


def token_required(f):
    """
    Decorator to require valid JWT token.

    Passes the caller's user id as the first argument to the decorated
    function.

    Usage:
        @bp.route('/history')
        @token_required
        def history(current_user_id):
            ...
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        token = _extract_token()
        if not token:
            return jsonify({'error': 'Token is missing'}), 401

        try:
            current_user_id = decode_user_id(token)
        except jwt.ExpiredSignatureError:
            return jsonify({'error': 'Token has expired'}), 401
        except jwt.InvalidTokenError:
            return jsonify({'error': 'Token is invalid'}), 401

        return f(current_user_id, *args, **kwargs)
    return decorated


def token_optional(f):
    """
    Decorator that optionally validates JWT token.

    Anonymous callers (or callers with a bad token) get ``None``. Used by the
    translate endpoint: anonymous translations are simply not saved.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        current_user_id = None
        token = _extract_token()

        if token:
            try:
                current_user_id = decode_user_id(token)
            except jwt.InvalidTokenError:
                current_user_id = None

        return f(current_user_id, *args, **kwargs)
    return decorated
