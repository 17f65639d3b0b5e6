"""
Admin Authorization

A single configured email address identifies the administrator. Requests
from anyone else get a plain 404 so the admin area does not reveal that it
exists.
"""

from flask import abort, current_app


def is_admin(user) -> bool:
    """Return True if `user` is the configured administrator."""
    if user is None:
        return False
    return getattr(user, 'email', None) == current_app.config['ADMIN_EMAIL']


def require_admin(user) -> None:
    """Abort with 404 unless `user` is the administrator."""
    if not is_admin(user):
        abort(404, description='Not found')


def extract_user_from_session(auth_session):
    if auth_session is None:
        return None
    return auth_session.user
