"""
Base model with common fields and utility methods.
"""
from datetime import UTC, datetime

from subscription_service import db
from subscription_service.utils.json_helpers import convert_decimal_in_dict


def utcnow():
    """Timezone-aware current time used for column defaults."""
    return datetime.now(UTC)


class BaseModel(db.Model):
    """
    Base model class that includes common fields and methods for all models.
    """
    __abstract__ = True

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    def to_dict(self):
        """
        Convert model instance to a JSON-ready dictionary.

        Returns:
            dict: Dictionary representation of the model.
        """
        return convert_decimal_in_dict({column.name: getattr(self, column.name)
                                        for column in self.__table__.columns})


def as_utc(value):
    """Attach UTC to naive datetimes read back from the database."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
