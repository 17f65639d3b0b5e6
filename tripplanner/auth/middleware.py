"""
Route Protection

Runs before every request: resolves the auth session once, keeps
Flask-Login in step with it, and redirects between protected pages and
the login/register pages.
"""

from flask import current_app, flash, g, redirect, request, session
from flask_login import logout_user

from tripplanner.auth.redirects import create_login_redirect, get_return_url
from tripplanner.auth.sessions import (
    SESSION_EXPIRED, SESSION_TOKEN_KEY, current_session_result,
)
from tripplanner.exceptions import ERROR_MESSAGES


def _matches(path, prefixes):
    return any(path.startswith(prefix) for prefix in prefixes)


def _current_path():
    if request.query_string:
        return f"{request.path}?{request.query_string.decode('utf-8', 'replace')}"
    return request.path


def protect_routes():
    if request.endpoint == 'static':
        return None

    result = current_session_result()
    g.auth_session = result.session
    g.user = result.session.user if result.is_valid else None

    # stale login cookie without a live auth session
    if not result.is_valid and ('_user_id' in session or SESSION_TOKEN_KEY in session):
        logout_user()
        session.pop(SESSION_TOKEN_KEY, None)

    config = current_app.config
    if not result.is_valid and _matches(request.path, config['PROTECTED_ROUTES']):
        if result.error == SESSION_EXPIRED:
            flash(ERROR_MESSAGES['SESSION_EXPIRED'], 'warning')
        return redirect(create_login_redirect(_current_path()))

    if result.is_valid and _matches(request.path, config['AUTH_ROUTES']):
        return redirect(get_return_url(request.args))

    return None


def register_route_guards(app):
    app.before_request(protect_routes)
