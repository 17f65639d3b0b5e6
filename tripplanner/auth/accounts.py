"""
User account operations: registration, credential checks, profile edits.
"""

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from tripplanner.extensions import db
from tripplanner.models import User
from tripplanner.utils import utcnow

logger = logging.getLogger(__name__)


def get_user_by_email(email):
    return User.query.filter_by(email=email.strip().lower()).first()


def register_user(name, email, password):
    """Create a user with a hashed password and return it."""
    user = User(
        name=name,
        email=email.strip().lower(),
        password_hash=generate_password_hash(password, method='pbkdf2:sha256'),
    )
    db.session.add(user)
    db.session.commit()
    logger.info('Registered user %s', user.email)
    return user


def authenticate(email, password):
    """Return the user for valid credentials, otherwise None."""
    user = get_user_by_email(email)
    if user and check_password_hash(user.password_hash, password):
        return user
    return None


def update_name(user, name):
    user.name = name
    user.updated_at = utcnow()
    db.session.commit()
    return user
