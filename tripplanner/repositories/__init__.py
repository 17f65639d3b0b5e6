"""Repository classes encapsulating catalogue database operations.

Each repository wraps a single table. Database failures surface as
`RepositoryError`; updates and deletes of missing rows raise
`NotFoundError`.
"""

from tripplanner.repositories.airports import AirportsRepository, airports_repository
from tripplanner.repositories.parks import ParksRepository, parks_repository

__all__ = ['AirportsRepository', 'airports_repository', 'ParksRepository', 'parks_repository']
