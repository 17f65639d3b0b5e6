"""
Profile Blueprint
"""

from flask import Blueprint

profile_bp = Blueprint('profile', __name__)

from tripplanner.profile import routes  # noqa: E402, F401
