"""
Main Routes
"""

from flask import render_template

from tripplanner.main import main_bp


@main_bp.route('/')
def index():
    """Home page"""
    return render_template('main/index.html')
