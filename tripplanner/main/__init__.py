"""
Main Blueprint
"""

from flask import Blueprint

main_bp = Blueprint('main', __name__)

from tripplanner.main import routes  # noqa: E402, F401
