"""Form validation built on pydantic models.

Each form model accepts the raw string values posted by a browser and
turns them into typed, normalised values. `parse_form` is the non-raising
entry point used by views: it returns either the model or a mapping of
field name to the first error message for that field.
"""

import re
from typing import Dict, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

M = TypeVar('M', bound=BaseModel)


def invalid(message: str) -> PydanticCustomError:
    """Build a validation error whose message is shown verbatim."""
    return PydanticCustomError('form_error', message)


def field_errors(exc: ValidationError) -> Dict[str, str]:
    errors = {}
    for err in exc.errors():
        field = str(err['loc'][0]) if err['loc'] else 'form'
        errors.setdefault(field, err['msg'])
    return errors


def parse_form(schema: Type[M], data) -> Tuple[Optional[M], Optional[Dict[str, str]]]:
    """Validate `data` against `schema` without raising.

    `data` may be a plain dict or a werkzeug MultiDict (first value wins).
    """
    data = data.to_dict() if hasattr(data, 'to_dict') else dict(data)
    try:
        return schema.model_validate(data), None
    except ValidationError as exc:
        return None, field_errors(exc)


def blank(value) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == '')


def text(value, *, required: Optional[str] = None, min_length: int = 0,
         min_message: Optional[str] = None, max_length: Optional[int] = None,
         max_message: Optional[str] = None) -> Optional[str]:
    """Trim a text input and enforce its length limits.

    Blank optional values become None.
    """
    if blank(value):
        if required:
            raise invalid(required)
        return None
    value = str(value).strip()
    if len(value) < min_length:
        raise invalid(min_message or required)
    if max_length is not None and len(value) > max_length:
        raise invalid(max_message)
    return value


def code(value, *, length: int, required: Optional[str], length_message: str,
         pattern_message: str) -> Optional[str]:
    """Trim and upper-case a fixed-length letter code (IATA/ICAO)."""
    if blank(value):
        if required:
            raise invalid(required)
        return None
    value = str(value).strip().upper()
    if len(value) != length:
        raise invalid(length_message)
    if not re.fullmatch(rf'[A-Z]{{{length}}}', value):
        raise invalid(pattern_message)
    return value


def number(value, *, required: Optional[str], invalid_message: str,
           minimum: Optional[float] = None, min_message: Optional[str] = None,
           maximum: Optional[float] = None, max_message: Optional[str] = None) -> Optional[float]:
    """Parse a decimal input and range-check it."""
    if blank(value):
        if required:
            raise invalid(required)
        return None
    try:
        num = float(value)
    except (TypeError, ValueError):
        raise invalid(invalid_message)
    if num != num:  # NaN
        raise invalid(invalid_message)
    if minimum is not None and num < minimum:
        raise invalid(min_message)
    if maximum is not None and num > maximum:
        raise invalid(max_message)
    return num


def record_id(value, message: str) -> int:
    try:
        num = int(value)
    except (TypeError, ValueError):
        raise invalid(message)
    if num <= 0:
        raise invalid(message)
    return num


LATITUDE_RANGE = 'Latitude must be between -90 and 90 degrees'
LONGITUDE_RANGE = 'Longitude must be between -180 and 180 degrees'


def latitude(value, required: Optional[str] = None) -> Optional[float]:
    return number(value, required=required, invalid_message='Invalid latitude format',
                  minimum=-90, min_message=LATITUDE_RANGE,
                  maximum=90, max_message=LATITUDE_RANGE)


def longitude(value, required: Optional[str] = None) -> Optional[float]:
    return number(value, required=required, invalid_message='Invalid longitude format',
                  minimum=-180, min_message=LONGITUDE_RANGE,
                  maximum=180, max_message=LONGITUDE_RANGE)


class Coordinates(BaseModel):
    """A required latitude/longitude pair."""
    latitude: float = Field(default='', validate_default=True)
    longitude: float = Field(default='', validate_default=True)

    @field_validator('latitude', mode='before')
    @classmethod
    def _latitude(cls, value):
        return latitude(value, required='Latitude is required')

    @field_validator('longitude', mode='before')
    @classmethod
    def _longitude(cls, value):
        return longitude(value, required='Longitude is required')


class SearchQuery(BaseModel):
    query: str = Field(default='', validate_default=True)

    @field_validator('query', mode='before')
    @classmethod
    def _query(cls, value):
        return text(value, required='Search query is required', max_length=100,
                    max_message='Search query must be less than 100 characters')
