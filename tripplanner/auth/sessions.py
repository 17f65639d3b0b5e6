"""
Auth Sessions

Login state is a row in the `session` table. The Flask cookie carries only
the row's token; every request re-validates it against the database so an
expired or revoked session stops working immediately.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from flask import current_app, g, request, session
from flask_login import login_user, logout_user
from sqlalchemy.exc import SQLAlchemyError

from tripplanner.extensions import db
from tripplanner.models import AuthSession
from tripplanner.utils import utcnow

logger = logging.getLogger(__name__)

SESSION_TOKEN_KEY = 'session_token'

NO_SESSION = 'No active session found'
SESSION_EXPIRED = 'Session has expired'
VALIDATION_FAILED = 'Session validation failed'


@dataclass
class SessionValidationResult:
    is_valid: bool
    session: Optional[AuthSession] = None
    error: Optional[str] = None


@dataclass
class AuthState:
    """What templates need to know about the signed-in user."""
    is_authenticated: bool
    user: Optional[object] = None
    session: Optional[AuthSession] = None


def is_session_expired(expires_at) -> bool:
    return expires_at < utcnow()


def has_access(auth_session, required_permissions=()) -> bool:
    """Return True if `auth_session` grants access.

    Any live session is enough for now; `required_permissions` is accepted
    so callers can already state what they need.
    """
    if auth_session is None:
        return False
    return not is_session_expired(auth_session.expires_at)


def create_auth_state(auth_session=None) -> AuthState:
    return AuthState(
        is_authenticated=auth_session is not None,
        user=auth_session.user if auth_session is not None else None,
        session=auth_session,
    )


def create_session(user, ip_address=None, user_agent=None) -> AuthSession:
    """Persist a new auth session for `user`."""
    now = utcnow()
    auth_session = AuthSession(
        user_id=user.id,
        expires_at=now + current_app.config['SESSION_LIFETIME'],
        ip_address=ip_address,
        user_agent=user_agent,
        created_at=now,
        updated_at=now,
    )
    db.session.add(auth_session)
    db.session.commit()
    return auth_session


def validate_session(token=None) -> SessionValidationResult:
    """Check the session token from the cookie (or `token`) against the database."""
    if token is None:
        token = session.get(SESSION_TOKEN_KEY)
    if not token:
        return SessionValidationResult(False, error=NO_SESSION)

    try:
        auth_session = AuthSession.query.filter_by(token=token).first()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Session validation error')
        return SessionValidationResult(False, error=VALIDATION_FAILED)

    if auth_session is None:
        return SessionValidationResult(False, error=NO_SESSION)

    if is_session_expired(auth_session.expires_at):
        cleanup_expired_session(token)
        return SessionValidationResult(False, error=SESSION_EXPIRED)

    return SessionValidationResult(True, session=auth_session)


def cleanup_expired_session(token) -> None:
    """Delete an expired session row. Failures are logged, never raised."""
    try:
        AuthSession.query.filter_by(token=token).delete()
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Failed to cleanup expired session')


def revoke_session(token) -> bool:
    """Delete the session row for `token`; returns whether one existed."""
    deleted = AuthSession.query.filter_by(token=token).delete()
    db.session.commit()
    return bool(deleted)


def current_session_result() -> SessionValidationResult:
    """Validation result for this request, computed once."""
    if 'session_result' not in g:
        g.session_result = validate_session()
    return g.session_result


def sign_in(user, remember=False) -> AuthSession:
    """Open an auth session for `user` and bind it to the cookie."""
    auth_session = create_session(
        user,
        ip_address=request.remote_addr,
        user_agent=request.headers.get('User-Agent'),
    )
    session.clear()
    session[SESSION_TOKEN_KEY] = auth_session.token
    session.permanent = bool(remember)
    login_user(user)
    g.session_result = SessionValidationResult(True, session=auth_session)
    return auth_session


def sign_out() -> None:
    """Revoke the current auth session and forget the login."""
    token = session.get(SESSION_TOKEN_KEY)
    try:
        if token:
            revoke_session(token)
    finally:
        logout_user()
        session.clear()
        g.pop('session_result', None)
