"""
Auth Routes

Registration, login and logout backed by database auth sessions.
"""

import logging

from flask import flash, g, redirect, render_template, request, url_for
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from tripplanner.auth import auth_bp
from tripplanner.auth.accounts import authenticate, get_user_by_email, register_user
from tripplanner.auth.redirects import get_return_url
from tripplanner.auth.sessions import sign_in, sign_out
from tripplanner.exceptions import ERROR_MESSAGES
from tripplanner.extensions import db
from tripplanner.validation import parse_form
from tripplanner.validation.auth import LoginForm, RegisterForm, get_password_strength

logger = logging.getLogger(__name__)


@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    """User registration route"""
    if request.method == 'GET':
        return render_template('auth/register.html', errors={}, values={})

    # passwords are never echoed back
    values = {'name': request.form.get('name', ''), 'email': request.form.get('email', '')}

    form, errors = parse_form(RegisterForm, request.form)
    if errors:
        strength = get_password_strength(request.form.get('password', ''))
        return render_template('auth/register.html', errors=errors, values=values,
                               strength=strength), 400

    if get_user_by_email(form.email):
        errors = {'email': ERROR_MESSAGES['EMAIL_ALREADY_EXISTS']}
        return render_template('auth/register.html', errors=errors, values=values), 400

    try:
        user = register_user(form.name, form.email, form.password)
        sign_in(user)
    except IntegrityError:
        db.session.rollback()
        errors = {'email': ERROR_MESSAGES['EMAIL_ALREADY_EXISTS']}
        return render_template('auth/register.html', errors=errors, values=values), 400
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Registration error')
        return render_template('auth/register.html', errors={}, values=values,
                               error=ERROR_MESSAGES['UNKNOWN_ERROR']), 500

    flash(f'Welcome, {user.name}! Your account has been created.', 'success')
    return redirect(url_for('main.index'))


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """User login route"""
    if request.method == 'GET':
        return render_template('auth/login.html', errors={}, values={})

    values = {'email': request.form.get('email', '')}

    form, errors = parse_form(LoginForm, request.form)
    if errors:
        return render_template('auth/login.html', errors=errors, values=values), 400

    try:
        user = authenticate(form.email, form.password)
        if user is None:
            return render_template('auth/login.html', errors={}, values=values,
                                   error=ERROR_MESSAGES['INVALID_CREDENTIALS']), 400
        sign_in(user, remember=form.remember_me)
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Login error')
        return render_template('auth/login.html', errors={}, values=values,
                               error=ERROR_MESSAGES['UNKNOWN_ERROR']), 500

    flash(f'Welcome back, {user.name}!', 'success')
    return redirect(get_return_url(request.args))


@auth_bp.route('/logout', methods=['GET', 'POST'])
def logout():
    """Confirm (GET) or perform (POST) logout"""
    if request.method == 'GET':
        if g.get('user') is None:
            return redirect(url_for('main.index'))
        return render_template('auth/logout.html')

    try:
        sign_out()
    except SQLAlchemyError:
        # the cookie is already cleared, so the user is logged out either way
        db.session.rollback()
        logger.exception('Logout error')

    flash('You have been logged out successfully.', 'info')
    return redirect(url_for('main.index'))
