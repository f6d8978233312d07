"""
Key/value store for service-wide settings.
"""
from subscription_service import db

from .base import BaseModel

PROCESSING_FEE_KEY = 'payment_processing_fee'


class SystemConfig(BaseModel):
    """Service-wide setting stored as text."""
    __tablename__ = 'system_config'

    key = db.Column(db.String(100), unique=True, nullable=False)
    value = db.Column(db.String(255), nullable=False)

    @classmethod
    def get_value(cls, key, default=None):
        row = cls.query.filter_by(key=key).first()
        return row.value if row else default

    @classmethod
    def set_value(cls, key, value):
        """Create or update a setting without committing."""
        row = cls.query.filter_by(key=key).first()
        if row is None:
            row = cls(key=key, value=str(value))
            db.session.add(row)
        else:
            row.value = str(value)
        return row

    @classmethod
    def get_processing_fee(cls):
        """Global processing fee percentage, 0 when unset."""
        return float(cls.get_value(PROCESSING_FEE_KEY, '0'))

    @classmethod
    def set_processing_fee(cls, percentage):
        return cls.set_value(PROCESSING_FEE_KEY, percentage)

    def __repr__(self):
        return f"<SystemConfig {self.key}={self.value}>"
