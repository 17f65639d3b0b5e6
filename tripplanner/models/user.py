"""
User and Auth Session Models
"""

import secrets
import uuid

from flask_login import UserMixin

from tripplanner.extensions import db
from tripplanner.utils import utcnow


def _new_id():
    return str(uuid.uuid4())


class User(UserMixin, db.Model):
    """Registered application user"""
    __tablename__ = 'user'

    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    name = db.Column(db.Text, nullable=False)
    email = db.Column(db.Text, nullable=False, unique=True)
    email_verified = db.Column(db.Boolean, nullable=False, default=False)
    image = db.Column(db.Text)
    password_hash = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    sessions = db.relationship('AuthSession', backref='user', lazy=True,
                               cascade='all, delete-orphan')

    def __repr__(self):
        return f'<User {self.email}>'


class AuthSession(db.Model):
    """Server-side login session referenced by a token in the cookie"""
    __tablename__ = 'session'

    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    token = db.Column(db.String(64), nullable=False, unique=True,
                      default=lambda: secrets.token_urlsafe(32))
    expires_at = db.Column(db.DateTime, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)
    ip_address = db.Column(db.Text)
    user_agent = db.Column(db.Text)
    user_id = db.Column(db.String(36), db.ForeignKey('user.id', ondelete='CASCADE'),
                        nullable=False)

    def __repr__(self):
        return f'<AuthSession user:{self.user_id} expires:{self.expires_at}>'
