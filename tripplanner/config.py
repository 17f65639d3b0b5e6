"""
Configuration settings for the Trip Planner application
"""
import os
from datetime import timedelta


class Config:
    """Flask application configuration"""

    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'tripplanner.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Administrator identity (single email, compared verbatim)
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL') or 'admin@example.com'

    # Auth sessions
    SESSION_LIFETIME = timedelta(days=int(os.environ.get('SESSION_LIFETIME_DAYS', '7')))
    PERMANENT_SESSION_LIFETIME = SESSION_LIFETIME
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Route protection
    PROTECTED_ROUTES = ['/profile', '/dashboard', '/trips', '/settings']
    AUTH_ROUTES = ['/auth/login', '/auth/register']

    # Admin listings
    PARKS_PER_PAGE = 20
    AIRPORTS_PER_PAGE = 20

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    WTF_CSRF_ENABLED = False
    ADMIN_EMAIL = 'admin@example.com'
    LOG_LEVEL = 'WARNING'
