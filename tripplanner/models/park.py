"""
National Park Model
"""

from tripplanner.extensions import db
from tripplanner.utils import utcnow


class NationalPark(db.Model):
    """National park catalogue entry"""
    __tablename__ = 'national_parks'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Text, nullable=False)
    state = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text)
    latitude = db.Column(db.Numeric(10, 8, asdecimal=False))
    longitude = db.Column(db.Numeric(11, 8, asdecimal=False))
    established_date = db.Column(db.Date)
    area = db.Column(db.Numeric(10, 2, asdecimal=False))  # square miles
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    def __repr__(self):
        return f'<NationalPark {self.name} ({self.state})>'
