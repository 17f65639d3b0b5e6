"""Data access for the national parks catalogue."""

import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from tripplanner.exceptions import ConflictError, NotFoundError, RepositoryError
from tripplanner.extensions import db
from tripplanner.models import NationalPark
from tripplanner.utils import utcnow

logger = logging.getLogger(__name__)

_FIELDS = ('name', 'state', 'description', 'latitude', 'longitude', 'established_date', 'area')


class ParksRepository:
    """CRUD and search operations for `NationalPark` rows."""

    def get_all(self) -> List[NationalPark]:
        """Return all parks ordered by name."""
        try:
            return NationalPark.query.order_by(NationalPark.name).all()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise RepositoryError(f'Failed to fetch parks: {e}') from e

    def get_by_id(self, park_id: int) -> Optional[NationalPark]:
        try:
            return db.session.get(NationalPark, park_id)
        except SQLAlchemyError as e:
            db.session.rollback()
            raise RepositoryError(f'Failed to fetch park with ID {park_id}: {e}') from e

    def create(self, data: dict) -> NationalPark:
        now = utcnow()
        park = NationalPark(**{k: data.get(k) for k in _FIELDS}, created_at=now, updated_at=now)
        try:
            db.session.add(park)
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            raise ConflictError(f'Failed to create park: {e.orig}') from e
        except SQLAlchemyError as e:
            db.session.rollback()
            raise RepositoryError(f'Failed to create park: {e}') from e
        logger.info('Created park %s (%s)', park.name, park.state)
        return park

    def update(self, park_id: int, data: dict) -> NationalPark:
        """Apply the keys present in `data` to an existing park."""
        park = self.get_by_id(park_id)
        if park is None:
            raise NotFoundError(f'Park with ID {park_id} not found')

        for key in _FIELDS:
            if key in data:
                setattr(park, key, data[key])
        park.updated_at = utcnow()

        try:
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            raise ConflictError(f'Failed to update park: {e.orig}') from e
        except SQLAlchemyError as e:
            db.session.rollback()
            raise RepositoryError(f'Failed to update park: {e}') from e
        logger.info('Updated park %s (id=%s)', park.name, park_id)
        return park

    def delete(self, park_id: int) -> None:
        park = self.get_by_id(park_id)
        if park is None:
            raise NotFoundError(f'Park with ID {park_id} not found')
        try:
            db.session.delete(park)
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            raise ConflictError(f'Failed to delete park: {e.orig}') from e
        except SQLAlchemyError as e:
            db.session.rollback()
            raise RepositoryError(f'Failed to delete park: {e}') from e
        logger.info('Deleted park id=%s', park_id)

    def search(self, query: str) -> List[NationalPark]:
        """Case-insensitive substring search over name and state."""
        term = f'%{query}%'
        try:
            return NationalPark.query.filter(or_(
                NationalPark.name.ilike(term),
                NationalPark.state.ilike(term),
            )).order_by(NationalPark.name).all()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise RepositoryError(f'Failed to search parks: {e}') from e

    def exists_in_state(self, name: str, state: str, exclude_id: Optional[int] = None) -> bool:
        """Return True if a park with the same name already exists in `state`."""
        try:
            q = db.session.query(NationalPark.id).filter(
                NationalPark.name == name.strip(),
                NationalPark.state == state.strip(),
            )
            if exclude_id:
                q = q.filter(NationalPark.id != exclude_id)
            return q.first() is not None
        except SQLAlchemyError as e:
            db.session.rollback()
            raise RepositoryError(f'Failed to check park existence: {e}') from e


parks_repository = ParksRepository()
