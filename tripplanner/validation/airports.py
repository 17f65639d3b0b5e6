"""Validation for the airport create/edit/search forms."""

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from tripplanner.validation import (
    SearchQuery, code, invalid, latitude, longitude, number, record_id, text,
)

_TIMEZONE = re.compile(r'[A-Za-z_/]+')


def _iata(value, required='IATA code is required'):
    return code(value, length=3, required=required,
                length_message='IATA code must be exactly 3 characters',
                pattern_message='IATA code must be 3 uppercase letters')


def _icao(value, required=None):
    return code(value, length=4, required=required,
                length_message='ICAO code must be exactly 4 characters',
                pattern_message='ICAO code must be 4 uppercase letters')


class AirportForm(BaseModel):
    """Fields posted by the airport create form."""
    iata_code: str = Field(default='', validate_default=True)
    icao_code: Optional[str] = None
    name: str = Field(default='', validate_default=True)
    city: str = Field(default='', validate_default=True)
    state: Optional[str] = None
    country: str = Field(default='', validate_default=True)
    latitude: float = Field(default='', validate_default=True)
    longitude: float = Field(default='', validate_default=True)
    elevation: Optional[int] = None
    timezone: Optional[str] = None

    @field_validator('iata_code', mode='before')
    @classmethod
    def _iata_code(cls, value):
        return _iata(value)

    @field_validator('icao_code', mode='before')
    @classmethod
    def _icao_code(cls, value):
        return _icao(value)

    @field_validator('name', mode='before')
    @classmethod
    def _name(cls, value):
        return text(value, required='Airport name is required', max_length=200,
                    max_message='Airport name must be less than 200 characters')

    @field_validator('city', mode='before')
    @classmethod
    def _city(cls, value):
        return text(value, required='City is required', max_length=100,
                    max_message='City must be less than 100 characters')

    @field_validator('state', mode='before')
    @classmethod
    def _state(cls, value):
        return text(value, max_length=100, max_message='State must be less than 100 characters')

    @field_validator('country', mode='before')
    @classmethod
    def _country(cls, value):
        return text(value, required='Country is required', max_length=100,
                    max_message='Country must be less than 100 characters')

    @field_validator('latitude', mode='before')
    @classmethod
    def _latitude(cls, value):
        return latitude(value, required='Latitude is required')

    @field_validator('longitude', mode='before')
    @classmethod
    def _longitude(cls, value):
        return longitude(value, required='Longitude is required')

    @field_validator('elevation', mode='before')
    @classmethod
    def _elevation(cls, value):
        num = number(value, required=None, invalid_message='Invalid elevation format',
                     minimum=-1500, min_message='Elevation seems unreasonably low',
                     maximum=30000, max_message='Elevation seems unreasonably high')
        if num is None:
            return None
        if not num.is_integer():
            raise invalid('Elevation must be a whole number')
        return int(num)

    @field_validator('timezone', mode='before')
    @classmethod
    def _timezone(cls, value):
        value = text(value, max_length=50, max_message='Timezone must be less than 50 characters')
        if value is not None and not _TIMEZONE.fullmatch(value):
            raise invalid('Invalid timezone format')
        return value


class AirportUpdateForm(AirportForm):
    """Edit form: every field optional, plus the airport id."""
    id: int
    iata_code: Optional[str] = None
    name: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @field_validator('id', mode='before')
    @classmethod
    def _id(cls, value):
        return record_id(value, 'Invalid airport ID')


class AirportSearch(SearchQuery):
    pass


class IataCode(BaseModel):
    code: str

    @field_validator('code', mode='before')
    @classmethod
    def _code(cls, value):
        return _iata(value)


class IcaoCode(BaseModel):
    code: str

    @field_validator('code', mode='before')
    @classmethod
    def _code(cls, value):
        return _icao(value, required='ICAO code is required')


def validate_iata_code(value: str) -> str:
    """Upper-case and check an IATA code; raises pydantic.ValidationError."""
    return IataCode(code=value).code


def validate_icao_code(value: str) -> str:
    """Upper-case and check an ICAO code; raises pydantic.ValidationError."""
    return IcaoCode(code=value).code
