"""
Country to pricing region mapping.
"""
from subscription_service import db

from .base import BaseModel


class CountryRegion(BaseModel):
    """
    Maps an ISO country code to a pricing region.

    Attributes:
        country_code (str): Upper-cased ISO 3166 alpha-2 code
        country_name (str): Display name
        region (str): Region code (e.g., "region_4")
    """
    __tablename__ = 'country_region_mappings'

    country_code = db.Column(db.String(2), unique=True, nullable=False, index=True)
    country_name = db.Column(db.String(100), nullable=False)
    region = db.Column(db.String(50), nullable=False, index=True)

    @classmethod
    def by_country_code(cls, country_code):
        """Mapping for a country code, case-insensitive."""
        return cls.query.filter_by(country_code=country_code.upper()).first()

    @classmethod
    def countries_in(cls, region):
        """All countries of a region ordered by name."""
        return cls.query.filter_by(region=region).order_by(cls.country_name).all()

    @classmethod
    def all_mappings(cls):
        return cls.query.order_by(cls.region, cls.country_name).all()

    @classmethod
    def upsert(cls, country_code, country_name, region):
        """Create or update the mapping of a country without committing."""
        mapping = cls.by_country_code(country_code)
        if mapping is None:
            mapping = cls(country_code=country_code.upper())
            db.session.add(mapping)
        mapping.country_name = country_name
        mapping.region = region
        return mapping

    def __repr__(self):
        return f"<CountryRegion {self.country_code} -> {self.region}>"
