"""
Admin Decorator
"""

from functools import wraps

from tripplanner.auth.admin import extract_user_from_session, require_admin
from tripplanner.auth.sessions import current_session_result


def admin_required(f):
    """Decorator to ensure the request comes from the administrator.

    - Validates the auth session (expired sessions count as signed out)
    - Non-admins, including anonymous visitors, get 404 rather than a
      redirect or 403
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        result = current_session_result()
        require_admin(extract_user_from_session(result.session))
        return f(*args, **kwargs)
    return wrapper
