"""
Flask Extensions

Extension instances are created unbound here and initialised in the
application factory.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_wtf.csrf import CSRFProtect

# Database instance
db = SQLAlchemy()

# Login manager for user authentication
login_manager = LoginManager()

# CSRF protection for form posts
csrf = CSRFProtect()
