"""Validation for the registration, login and profile forms."""

import re

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from tripplanner.exceptions import ERROR_MESSAGES
from tripplanner.validation import blank, invalid

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
PASSWORD_PATTERN = re.compile(r'^(?=.*[A-Za-z])(?=.*\d)')

EMAIL_MESSAGE = ERROR_MESSAGES['INVALID_EMAIL']
PASSWORD_MESSAGE = 'Password must be at least 8 characters with letters and numbers'
NAME_MESSAGE = 'Name must be between 2 and 50 characters'


def check_email(value) -> str:
    if blank(value):
        raise invalid(EMAIL_MESSAGE)
    value = value.strip()
    if not EMAIL_PATTERN.match(value):
        raise invalid(EMAIL_MESSAGE)
    return value.lower()


def check_name(value) -> str:
    if blank(value):
        raise invalid(NAME_MESSAGE)
    value = value.strip()
    if not 2 <= len(value) <= 50:
        raise invalid(NAME_MESSAGE)
    return value


class RegisterForm(BaseModel):
    name: str = Field(default='', validate_default=True)
    email: str = Field(default='', validate_default=True)
    password: str = Field(default='', validate_default=True)
    confirm_password: str = Field(default='', validate_default=True)

    @field_validator('name', mode='before')
    @classmethod
    def _name(cls, value):
        return check_name(value)

    @field_validator('email', mode='before')
    @classmethod
    def _email(cls, value):
        return check_email(value)

    @field_validator('password', mode='before')
    @classmethod
    def _password(cls, value):
        if blank(value) or len(value) < 8 or not PASSWORD_PATTERN.match(value):
            raise invalid(PASSWORD_MESSAGE)
        return value

    @field_validator('confirm_password', mode='before')
    @classmethod
    def _confirm_password(cls, value, info: ValidationInfo):
        if blank(value):
            raise invalid('Please confirm your password')
        password = info.data.get('password')
        if password and value != password:
            raise invalid(ERROR_MESSAGES['PASSWORDS_DONT_MATCH'])
        return value


class LoginForm(BaseModel):
    email: str = Field(default='', validate_default=True)
    password: str = Field(default='', validate_default=True)
    remember_me: bool = False

    @field_validator('email', mode='before')
    @classmethod
    def _email(cls, value):
        return check_email(value)

    @field_validator('password', mode='before')
    @classmethod
    def _password(cls, value):
        if blank(value):
            raise invalid('Password is required')
        return value

    @field_validator('remember_me', mode='before')
    @classmethod
    def _remember_me(cls, value):
        return value in (True, 'on', 'true', '1')


class ProfileForm(BaseModel):
    name: str = Field(default='', validate_default=True)

    @field_validator('name', mode='before')
    @classmethod
    def _name(cls, value):
        if blank(value):
            raise invalid('Name is required')
        return check_name(value)


def get_password_strength(password):
    """Score a password from 0 to 5 and describe it.

    Returns a dict with ``score``, ``feedback`` and ``color`` (red, yellow
    or green).
    """
    if not password:
        return {'score': 0, 'feedback': '', 'color': 'red'}

    score = 0
    missing = []

    if len(password) >= 8:
        score += 1
    else:
        missing.append('At least 8 characters')

    if re.search(r'[A-Za-z]', password):
        score += 1
    else:
        missing.append('Include letters')

    if re.search(r'\d', password):
        score += 1
    else:
        missing.append('Include numbers')

    # bonus points
    if re.search(r'[!@#$%^&*(),.?":{}|<>]', password):
        score += 1
    if re.search(r'[a-z]', password) and re.search(r'[A-Z]', password):
        score += 1

    if score <= 2:
        label, color = 'Weak', 'red'
    elif score <= 3:
        label, color = 'Fair', 'yellow'
    else:
        label, color = 'Strong', 'green'

    feedback = f"{label}. {', '.join(missing)}" if missing else label
    return {'score': score, 'feedback': feedback, 'color': color}
