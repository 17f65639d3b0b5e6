from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from tripplanner.validation import Coordinates, parse_form
from tripplanner.validation.airports import (
    AirportForm, AirportSearch, AirportUpdateForm, validate_iata_code, validate_icao_code,
)
from tripplanner.validation.auth import LoginForm, ProfileForm, RegisterForm, get_password_strength
from tripplanner.validation.parks import ParkForm, ParkUpdateForm


def airport_data(**overrides):
    data = {
        'iata_code': ' lax ',
        'icao_code': 'klax',
        'name': 'Los Angeles International Airport',
        'city': 'Los Angeles',
        'state': '',
        'country': 'United States',
        'latitude': '33.9416',
        'longitude': '-118.4085',
        'elevation': '125',
        'timezone': 'America/Los_Angeles',
    }
    data.update(overrides)
    return data


def test_airport_form_normalises_values():
    form, errors = parse_form(AirportForm, airport_data())
    assert errors is None
    assert form.iata_code == 'LAX'
    assert form.icao_code == 'KLAX'
    assert form.state is None
    assert form.latitude == pytest.approx(33.9416)
    assert form.elevation == 125


@pytest.mark.parametrize('field, value, message', [
    ('iata_code', '', 'IATA code is required'),
    ('iata_code', 'LA', 'IATA code must be exactly 3 characters'),
    ('iata_code', 'L4X', 'IATA code must be 3 uppercase letters'),
    ('icao_code', 'KLA', 'ICAO code must be exactly 4 characters'),
    ('name', '   ', 'Airport name is required'),
    ('name', 'x' * 201, 'Airport name must be less than 200 characters'),
    ('latitude', '91', 'Latitude must be between -90 and 90 degrees'),
    ('latitude', 'north', 'Invalid latitude format'),
    ('longitude', '-180.5', 'Longitude must be between -180 and 180 degrees'),
    ('elevation', '12.5', 'Elevation must be a whole number'),
    ('elevation', '40000', 'Elevation seems unreasonably high'),
    ('timezone', 'UTC+1', 'Invalid timezone format'),
])
def test_airport_form_errors(field, value, message):
    form, errors = parse_form(AirportForm, airport_data(**{field: value}))
    assert form is None
    assert errors[field] == message


def test_airport_form_reports_every_missing_field():
    _, errors = parse_form(AirportForm, {})
    assert set(errors) == {'iata_code', 'name', 'city', 'country', 'latitude', 'longitude'}


def test_airport_update_form_keeps_only_submitted_fields():
    form, errors = parse_form(AirportUpdateForm, {'id': '5', 'name': ' Renamed '})
    assert errors is None
    assert form.model_dump(exclude_unset=True) == {'id': 5, 'name': 'Renamed'}


def test_airport_update_form_rejects_bad_id():
    _, errors = parse_form(AirportUpdateForm, {'id': '0'})
    assert errors['id'] == 'Invalid airport ID'


def test_code_helpers():
    assert validate_iata_code('jfk') == 'JFK'
    assert validate_icao_code(' kjfk') == 'KJFK'
    with pytest.raises(ValidationError):
        validate_iata_code('JF')
    with pytest.raises(ValidationError):
        validate_icao_code('')


def test_search_query_limits():
    _, errors = parse_form(AirportSearch, {'query': 'a' * 101})
    assert errors['query'] == 'Search query must be less than 100 characters'
    _, errors = parse_form(AirportSearch, {'query': ''})
    assert errors['query'] == 'Search query is required'


def test_park_form_minimal():
    form, errors = parse_form(ParkForm, {'name': 'Zion', 'state': 'Utah', 'established_date': '1919-11-19'})
    assert errors is None
    assert form.established_date == date(1919, 11, 19)
    assert form.latitude is None
    assert form.area is None


@pytest.mark.parametrize('field, value, message', [
    ('name', '', 'Park name is required'),
    ('state', 'U', 'State is required'),
    ('state', 'x' * 51, 'State must be less than 50 characters'),
    ('description', 'x' * 2001, 'Description must be less than 2000 characters'),
    ('established_date', '19/11/1919', 'Invalid date format'),
    ('area', '0', 'Area must be a positive number'),
    ('area', '-5', 'Area must be a positive number'),
    ('area', '2000000', 'Area seems unreasonably large'),
])
def test_park_form_errors(field, value, message):
    data = {'name': 'Zion', 'state': 'Utah'}
    data[field] = value
    _, errors = parse_form(ParkForm, data)
    assert errors[field] == message


def test_park_form_rejects_future_date():
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    _, errors = parse_form(ParkForm, {'name': 'Zion', 'state': 'Utah', 'established_date': tomorrow})
    assert errors['established_date'] == 'Established date cannot be in the future'


def test_park_update_form():
    form, errors = parse_form(ParkUpdateForm, {'id': 3, 'area': '590.0'})
    assert errors is None
    assert form.model_dump(exclude_unset=True) == {'id': 3, 'area': 590.0}
    _, errors = parse_form(ParkUpdateForm, {'id': 'abc'})
    assert errors['id'] == 'Invalid park ID'


def test_register_form():
    form, errors = parse_form(RegisterForm, {
        'name': ' Ada ',
        'email': 'Ada@Example.COM',
        'password': 'passw0rd',
        'confirm_password': 'passw0rd',
    })
    assert errors is None
    assert form.name == 'Ada'
    assert form.email == 'ada@example.com'


def test_register_form_errors():
    _, errors = parse_form(RegisterForm, {
        'name': 'A',
        'email': 'not-an-email',
        'password': 'letters only',
        'confirm_password': 'something else',
    })
    assert errors['name'] == 'Name must be between 2 and 50 characters'
    assert errors['email'] == 'Please enter a valid email address'
    assert errors['password'] == 'Password must be at least 8 characters with letters and numbers'
    # confirmation is only compared against a valid password
    assert 'confirm_password' not in errors


def test_register_form_password_mismatch():
    _, errors = parse_form(RegisterForm, {
        'name': 'Ada',
        'email': 'ada@example.com',
        'password': 'passw0rd',
        'confirm_password': 'passw0rd!',
    })
    assert errors == {'confirm_password': 'Passwords do not match'}


def test_login_form():
    form, _ = parse_form(LoginForm, {'email': 'ada@example.com', 'password': 'x', 'remember_me': 'on'})
    assert form.remember_me is True
    form, _ = parse_form(LoginForm, {'email': 'ada@example.com', 'password': 'x'})
    assert form.remember_me is False
    _, errors = parse_form(LoginForm, {'email': 'ada@example.com', 'password': ''})
    assert errors == {'password': 'Password is required'}


def test_profile_form():
    _, errors = parse_form(ProfileForm, {'name': '  '})
    assert errors == {'name': 'Name is required'}
    _, errors = parse_form(ProfileForm, {'name': 'x' * 51})
    assert errors == {'name': 'Name must be between 2 and 50 characters'}


def test_password_strength():
    assert get_password_strength('')['score'] == 0

    weak = get_password_strength('abc')
    assert weak['score'] == 1
    assert weak['color'] == 'red'
    assert weak['feedback'] == 'Weak. At least 8 characters, Include numbers'

    assert get_password_strength('abcdefg1')['feedback'] == 'Fair'

    strong = get_password_strength('Abcdefg1!')
    assert strong['score'] == 5
    assert strong['color'] == 'green'


def test_login_form_trims_email():
    form, errors = parse_form(LoginForm, {'email': '  Ada@Example.com ', 'password': 'x'})
    assert errors is None
    assert form.email == 'ada@example.com'


@pytest.mark.parametrize('data, field, message', [
    ({'latitude': '', 'longitude': '0'}, 'latitude', 'Latitude is required'),
    ({'latitude': '0'}, 'longitude', 'Longitude is required'),
    ({'latitude': '-90.5', 'longitude': '0'}, 'latitude', 'Latitude must be between -90 and 90 degrees'),
    ({'latitude': '0', 'longitude': '181'}, 'longitude', 'Longitude must be between -180 and 180 degrees'),
    ({'latitude': 'nan', 'longitude': '0'}, 'latitude', 'Invalid latitude format'),
])
def test_coordinates_errors(data, field, message):
    _, errors = parse_form(Coordinates, data)
    assert errors[field] == message


def test_coordinates_bounds_are_inclusive():
    coords = Coordinates(latitude='-90', longitude=180)
    assert (coords.latitude, coords.longitude) == (-90.0, 180.0)
