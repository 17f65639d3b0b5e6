"""
Admin Routes
"""

import logging

from flask import g, render_template

from tripplanner.admin import admin_bp
from tripplanner.auth.decorators import admin_required
from tripplanner.models import Airport, NationalPark, User

logger = logging.getLogger(__name__)


@admin_bp.route('/')
@admin_required
def dashboard():
    """Admin dashboard with catalogue overview."""
    return render_template('admin/dashboard.html',
                           user=g.user,
                           auth_session=g.auth_session,
                           total_airports=Airport.query.count(),
                           total_parks=NationalPark.query.count(),
                           total_users=User.query.count())
