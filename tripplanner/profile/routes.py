"""
Profile Routes

View and edit the signed-in user's profile.
"""

import logging

from flask import g, render_template, request
from flask_login import login_required
from sqlalchemy.exc import SQLAlchemyError

from tripplanner.auth.accounts import update_name
from tripplanner.exceptions import ERROR_MESSAGES
from tripplanner.extensions import db
from tripplanner.profile import profile_bp
from tripplanner.validation import parse_form
from tripplanner.validation.auth import ProfileForm

logger = logging.getLogger(__name__)


def _render(status=200, **context):
    context.setdefault('field_errors', {})
    context.setdefault('values', {'name': g.user.name})
    return render_template('profile/profile.html', user=g.user,
                           auth_session=g.auth_session, **context), status


@profile_bp.route('/profile', methods=['GET'])
@login_required
def profile():
    return _render()


@profile_bp.route('/profile', methods=['POST'])
@login_required
def update_profile():
    """Change the display name"""
    raw_name = request.form.get('name', '')
    values = {'name': raw_name.strip()}

    form, errors = parse_form(ProfileForm, request.form)
    if errors:
        return _render(400, error=errors['name'], field_errors=errors, values=values)

    if form.name == g.user.name:
        return _render(400, error='No changes detected', values=values)

    try:
        update_name(g.user, form.name)
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Profile update error')
        return _render(500, error=ERROR_MESSAGES['UNKNOWN_ERROR'], values=values)

    return _render(message='Profile updated successfully!')
