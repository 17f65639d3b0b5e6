"""
Admin Blueprint

Catalogue management for the administrator. Every view is wrapped in
`admin_required`, which answers 404 to anyone else.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from tripplanner.admin import routes, airports, parks  # noqa: E402, F401
