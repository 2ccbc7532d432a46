"""Shared utilities for the translation backend.

This package contains reusable utilities that are shared across
multiple route files to reduce code duplication.
"""

from tribalbridge.utils.auth import token_required, token_optional

__all__ = [
    'token_required',
    'token_optional',
]
