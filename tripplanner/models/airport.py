"""
Airport Model
"""

from tripplanner.extensions import db
from tripplanner.utils import utcnow


class Airport(db.Model):
    """Airport catalogue entry"""
    __tablename__ = 'airports'

    id = db.Column(db.Integer, primary_key=True)
    iata_code = db.Column(db.Text, nullable=False, unique=True)  # e.g. LAX
    icao_code = db.Column(db.Text, unique=True)                  # e.g. KLAX
    name = db.Column(db.Text, nullable=False)
    city = db.Column(db.Text, nullable=False)
    state = db.Column(db.Text)
    country = db.Column(db.Text, nullable=False)
    latitude = db.Column(db.Numeric(10, 8, asdecimal=False), nullable=False)
    longitude = db.Column(db.Numeric(11, 8, asdecimal=False), nullable=False)
    elevation = db.Column(db.Integer)  # feet above sea level
    timezone = db.Column(db.Text)      # IANA identifier
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    def __repr__(self):
        return f'<Airport {self.iata_code}>'
