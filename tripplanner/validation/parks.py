"""Validation for the national park create/edit/search forms."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from tripplanner.validation import (
    SearchQuery, blank, invalid, latitude, longitude, number, record_id, text,
)


class ParkForm(BaseModel):
    """Fields posted by the park create form."""
    name: str = Field(default='', validate_default=True)
    state: str = Field(default='', validate_default=True)
    description: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    established_date: Optional[date] = None
    area: Optional[float] = None

    @field_validator('name', mode='before')
    @classmethod
    def _name(cls, value):
        return text(value, required='Park name is required', max_length=100,
                    max_message='Park name must be less than 100 characters')

    @field_validator('state', mode='before')
    @classmethod
    def _state(cls, value):
        return text(value, required='State is required', min_length=2, max_length=50,
                    max_message='State must be less than 50 characters')

    @field_validator('description', mode='before')
    @classmethod
    def _description(cls, value):
        return text(value, max_length=2000,
                    max_message='Description must be less than 2000 characters')

    @field_validator('latitude', mode='before')
    @classmethod
    def _latitude(cls, value):
        return latitude(value)

    @field_validator('longitude', mode='before')
    @classmethod
    def _longitude(cls, value):
        return longitude(value)

    @field_validator('established_date', mode='before')
    @classmethod
    def _established_date(cls, value):
        if blank(value):
            return None
        if isinstance(value, date):
            parsed = value
        else:
            try:
                parsed = date.fromisoformat(str(value).strip())
            except ValueError:
                raise invalid('Invalid date format')
        if parsed > date.today():
            raise invalid('Established date cannot be in the future')
        return parsed

    @field_validator('area', mode='before')
    @classmethod
    def _area(cls, value):
        num = number(value, required=None, invalid_message='Invalid area format',
                     maximum=1000000, max_message='Area seems unreasonably large')
        if num is not None and num <= 0:
            raise invalid('Area must be a positive number')
        return num


class ParkUpdateForm(ParkForm):
    """Edit form: every field optional, plus the park id."""
    id: int
    name: Optional[str] = None
    state: Optional[str] = None

    @field_validator('id', mode='before')
    @classmethod
    def _id(cls, value):
        return record_id(value, 'Invalid park ID')


class ParkSearch(SearchQuery):
    pass
