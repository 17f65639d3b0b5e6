"""Data access for the airports catalogue."""

import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from tripplanner.exceptions import ConflictError, NotFoundError, RepositoryError
from tripplanner.extensions import db
from tripplanner.models import Airport
from tripplanner.utils import utcnow

logger = logging.getLogger(__name__)

_FIELDS = ('iata_code', 'icao_code', 'name', 'city', 'state', 'country',
           'latitude', 'longitude', 'elevation', 'timezone')


def _upper(code):
    return code.upper() if code else code


class AirportsRepository:
    """CRUD and search operations for `Airport` rows."""

    def get_all(self) -> List[Airport]:
        """Return all airports ordered by name."""
        try:
            return Airport.query.order_by(Airport.name).all()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise RepositoryError(f'Failed to fetch airports: {e}') from e

    def get_by_id(self, airport_id: int) -> Optional[Airport]:
        """Return an airport by primary key or `None`."""
        try:
            return db.session.get(Airport, airport_id)
        except SQLAlchemyError as e:
            db.session.rollback()
            raise RepositoryError(f'Failed to fetch airport with ID {airport_id}: {e}') from e

    def get_by_iata_code(self, iata_code: str) -> Optional[Airport]:
        try:
            return Airport.query.filter_by(iata_code=iata_code.upper()).first()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise RepositoryError(f'Failed to fetch airport with IATA code {iata_code}: {e}') from e

    def create(self, data: dict) -> Airport:
        """Insert an airport; codes are stored upper-case."""
        now = utcnow()
        airport = Airport(**{k: data.get(k) for k in _FIELDS}, created_at=now, updated_at=now)
        airport.iata_code = _upper(airport.iata_code)
        airport.icao_code = _upper(airport.icao_code)
        try:
            db.session.add(airport)
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            raise ConflictError(f'Failed to create airport: {e.orig}') from e
        except SQLAlchemyError as e:
            db.session.rollback()
            raise RepositoryError(f'Failed to create airport: {e}') from e
        logger.info('Created airport %s (%s)', airport.iata_code, airport.name)
        return airport

    def update(self, airport_id: int, data: dict) -> Airport:
        """Apply the keys present in `data` to an existing airport."""
        airport = self.get_by_id(airport_id)
        if airport is None:
            raise NotFoundError(f'Airport with ID {airport_id} not found')

        for key in _FIELDS:
            if key in data:
                value = data[key]
                if key in ('iata_code', 'icao_code'):
                    value = _upper(value)
                setattr(airport, key, value)
        airport.updated_at = utcnow()

        try:
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            raise ConflictError(f'Failed to update airport: {e.orig}') from e
        except SQLAlchemyError as e:
            db.session.rollback()
            raise RepositoryError(f'Failed to update airport: {e}') from e
        logger.info('Updated airport %s (id=%s)', airport.iata_code, airport_id)
        return airport

    def delete(self, airport_id: int) -> None:
        airport = self.get_by_id(airport_id)
        if airport is None:
            raise NotFoundError(f'Airport with ID {airport_id} not found')
        try:
            db.session.delete(airport)
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            raise ConflictError(f'Failed to delete airport: {e.orig}') from e
        except SQLAlchemyError as e:
            db.session.rollback()
            raise RepositoryError(f'Failed to delete airport: {e}') from e
        logger.info('Deleted airport id=%s', airport_id)

    def search(self, query: str) -> List[Airport]:
        """Case-insensitive substring search over codes, name and location."""
        term = f'%{query}%'
        upper_term = f'%{query.upper()}%'
        try:
            return Airport.query.filter(or_(
                Airport.iata_code.ilike(upper_term),
                Airport.icao_code.ilike(upper_term),
                Airport.name.ilike(term),
                Airport.city.ilike(term),
                Airport.state.ilike(term),
                Airport.country.ilike(term),
            )).order_by(Airport.name).all()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise RepositoryError(f'Failed to search airports: {e}') from e

    def exists_by_iata_code(self, iata_code: str, exclude_id: Optional[int] = None) -> bool:
        """Return True if another airport already uses `iata_code`."""
        try:
            q = db.session.query(Airport.id).filter(Airport.iata_code == iata_code.upper())
            if exclude_id:
                q = q.filter(Airport.id != exclude_id)
            return q.first() is not None
        except SQLAlchemyError as e:
            db.session.rollback()
            raise RepositoryError(f'Failed to check airport existence by IATA code: {e}') from e

    def exists_by_icao_code(self, icao_code: Optional[str], exclude_id: Optional[int] = None) -> bool:
        """Return True if another airport already uses `icao_code`."""
        if not icao_code:
            return False
        try:
            q = db.session.query(Airport.id).filter(Airport.icao_code == icao_code.upper())
            if exclude_id:
                q = q.filter(Airport.id != exclude_id)
            return q.first() is not None
        except SQLAlchemyError as e:
            db.session.rollback()
            raise RepositoryError(f'Failed to check airport existence by ICAO code: {e}') from e


airports_repository = AirportsRepository()
