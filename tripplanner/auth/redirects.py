"""
Post-login redirect helpers.

Only same-site relative paths are accepted as redirect targets.
"""

from urllib.parse import urlsplit

from flask import url_for

NEXT_PARAM = 'next'


def is_valid_return_url(url) -> bool:
    """Return True if `url` is a relative path on this site."""
    if not url or '\\' in url:
        return False
    parts = urlsplit(url)
    if parts.scheme or parts.netloc:
        return False
    return parts.path.startswith('/') and not parts.path.startswith('//')


def get_return_url(args) -> str:
    """The validated `next` query parameter, or the home page."""
    return_url = args.get(NEXT_PARAM)
    if return_url and is_valid_return_url(return_url):
        return return_url
    return '/'


def create_login_redirect(current_path) -> str:
    """Login URL that returns to `current_path` afterwards."""
    if current_path and current_path != '/' and is_valid_return_url(current_path):
        return url_for('auth.login', **{NEXT_PARAM: current_path})
    return url_for('auth.login')
