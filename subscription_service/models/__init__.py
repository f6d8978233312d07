"""
Models package for SQLAlchemy database models.
"""
from .base import BaseModel
from .country_region import CountryRegion
from .gateway_config import GatewayType, RegionGatewayConfig
from .payment import Payment, PaymentStatus
from .regional_price import RegionalPrice
from .subscription_plan import PlanDuration, PlanType, ProcessingFeeType, SubscriptionPlan
from .system_config import SystemConfig
from .usage_record import UsageRecord, UsageStatus
from .user_subscription import SubscriptionStatus, UserSubscription

__all__ = [
    'BaseModel',
    'CountryRegion',
    'GatewayType',
    'Payment',
    'PaymentStatus',
    'PlanDuration',
    'PlanType',
    'ProcessingFeeType',
    'RegionGatewayConfig',
    'RegionalPrice',
    'SubscriptionPlan',
    'SubscriptionStatus',
    'SystemConfig',
    'UsageRecord',
    'UsageStatus',
    'UserSubscription',
]
