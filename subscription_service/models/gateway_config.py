"""
Per-region payment gateway configuration.
"""
from enum import Enum

from subscription_service import db

from .base import BaseModel


class GatewayType(Enum):
    """Enum for how a region routes payments between gateways."""
    STRIPE_ONLY = "stripe_only"
    PADDLE_ONLY = "paddle_only"
    SPLIT_50_50 = "split_50_50"

    @classmethod
    def values(cls):
        """Get all enum values."""
        return [e.value for e in cls]


class RegionGatewayConfig(BaseModel):
    """
    Gateway routing for one pricing region.

    Attributes:
        region (str): Region code, unique
        gateway_type (str): stripe_only, paddle_only or split_50_50
        stripe_enabled (bool): Stripe may take payments in the region
        paddle_enabled (bool): Paddle may take payments in the region
        split_percentage (Decimal): Share routed to Stripe in split mode
        recommendation_reason (str): Text shown to users with the recommendation
    """
    __tablename__ = 'region_gateway_configs'

    region = db.Column(db.String(50), unique=True, nullable=False, index=True)
    gateway_type = db.Column(db.String(20), nullable=False)
    stripe_enabled = db.Column(db.Boolean, nullable=False, default=False)
    paddle_enabled = db.Column(db.Boolean, nullable=False, default=False)
    split_percentage = db.Column(db.Numeric(5, 2), nullable=True)
    recommendation_reason = db.Column(db.Text, nullable=True)

    @classmethod
    def for_region(cls, region):
        return cls.query.filter_by(region=region).first()

    @classmethod
    def upsert(cls, region, config):
        """
        Create or replace the configuration of a region without committing.

        Args:
            region (str): Region code
            config (dict): Validated gateway config payload

        Returns:
            RegionGatewayConfig: The new or updated row
        """
        row = cls.for_region(region)
        if row is None:
            row = cls(region=region)
            db.session.add(row)
        row.gateway_type = config['gateway_type']
        row.stripe_enabled = config['stripe_enabled']
        row.paddle_enabled = config['paddle_enabled']
        row.split_percentage = config.get('split_percentage')
        row.recommendation_reason = config.get('recommendation_reason')
        return row

    def __repr__(self):
        return f"<RegionGatewayConfig {self.region} - {self.gateway_type}>"
