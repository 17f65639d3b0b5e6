import pytest
from sqlalchemy import text

from tripplanner import create_app
from tripplanner.auth.accounts import register_user
from tripplanner.config import TestConfig
from tripplanner.extensions import db
from tripplanner.repositories import airports_repository, parks_repository

PASSWORD = 'secret123'

AIRPORT = {
    'iata_code': 'LAX',
    'icao_code': 'KLAX',
    'name': 'Los Angeles International Airport',
    'city': 'Los Angeles',
    'state': 'California',
    'country': 'United States',
    'latitude': 33.9416,
    'longitude': -118.4085,
    'elevation': 125,
    'timezone': 'America/Los_Angeles',
}

PARK = {
    'name': 'Yosemite National Park',
    'state': 'California',
    'description': 'Granite cliffs and giant sequoias.',
    'latitude': 37.8651,
    'longitude': -119.5383,
    'area': 3082.74,
}


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def password():
    return PASSWORD


@pytest.fixture()
def make_user(app):
    def _make_user(email='traveler@example.com', name='Test Traveler', password=PASSWORD):
        with app.app_context():
            return register_user(name, email, password).id
    return _make_user


@pytest.fixture()
def make_airport(app):
    def _make_airport(**overrides):
        with app.app_context():
            return airports_repository.create({**AIRPORT, **overrides}).id
    return _make_airport


@pytest.fixture()
def make_park(app):
    def _make_park(**overrides):
        with app.app_context():
            return parks_repository.create({**PARK, **overrides}).id
    return _make_park


@pytest.fixture()
def login(client):
    def _login(email, password=PASSWORD, next_url=None):
        url = '/auth/login' if next_url is None else f'/auth/login?next={next_url}'
        return client.post(url, data={'email': email, 'password': password})
    return _login


@pytest.fixture()
def drop_table(app):
    """Drop a table so the next query against it fails."""
    def _drop_table(name):
        with app.app_context():
            db.session.execute(text(f'DROP TABLE {name}'))
            db.session.commit()
    return _drop_table


@pytest.fixture()
def user_client(client, make_user, login):
    make_user()
    login('traveler@example.com')
    return client


@pytest.fixture()
def admin_client(client, make_user, login):
    make_user(email=TestConfig.ADMIN_EMAIL, name='Site Admin')
    login(TestConfig.ADMIN_EMAIL)
    return client
