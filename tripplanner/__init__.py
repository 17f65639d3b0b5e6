"""
Trip Planner - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, g

from tripplanner.config import Config
from tripplanner.extensions import csrf, db, login_manager


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )

    # Initialize extensions
    db.init_app(app)
    csrf.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'
    login_manager.login_message_category = 'info'

    # Register blueprints
    from tripplanner.main import main_bp
    from tripplanner.auth import auth_bp
    from tripplanner.profile import profile_bp
    from tripplanner.admin import admin_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(profile_bp)
    app.register_blueprint(admin_bp, url_prefix='/admin')

    # Route protection runs before every view
    from tripplanner.auth.middleware import register_route_guards
    register_route_guards(app)

    @app.context_processor
    def inject_auth_state():
        """Inject `auth_state` and `is_admin` into templates."""
        from tripplanner.auth.admin import is_admin
        from tripplanner.auth.sessions import create_auth_state
        user = g.get('user')
        return dict(auth_state=create_auth_state(g.get('auth_session') if user else None),
                    is_admin=is_admin(user))

    # User loader for Flask-Login: only a live auth session yields a user
    @login_manager.user_loader
    def load_user(user_id):
        from tripplanner.auth.sessions import current_session_result
        result = current_session_result()
        if result.is_valid and result.session.user_id == user_id:
            return result.session.user
        return None

    @login_manager.unauthorized_handler
    def unauthorized():
        from flask import redirect, request
        from tripplanner.auth.redirects import create_login_redirect
        return redirect(create_login_redirect(request.path))

    # Create database tables
    with app.app_context():
        if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///') and not app.testing:
            os.makedirs(os.path.join(Config.basedir, 'instance'), exist_ok=True)
        db.create_all()

    return app
