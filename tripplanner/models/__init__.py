"""
Models Package

Exports all models for easy importing.
"""

from tripplanner.models.user import User, AuthSession
from tripplanner.models.airport import Airport
from tripplanner.models.park import NationalPark

__all__ = ['User', 'AuthSession', 'Airport', 'NationalPark']
