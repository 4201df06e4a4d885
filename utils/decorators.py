"""
Decorators Module - Route guards
"""

from functools import wraps
from flask import current_app
from .errors import NotFoundError


def admin_api_enabled(f):
    """Hide an admin endpoint (404) unless ADMIN_API_ENABLED is set"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_app.config.get('ADMIN_API_ENABLED', False):
            raise NotFoundError('Not found.')
        return f(*args, **kwargs)
    return decorated_function
