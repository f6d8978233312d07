"""
Payment gateway recommendation for a payer's country.
"""
import random

from subscription_service.models.country_region import CountryRegion
from subscription_service.models.gateway_config import GatewayType, RegionGatewayConfig
from subscription_service.models.regional_price import RegionalPrice

STRIPE = 'stripe'
PADDLE = 'paddle'

PAYMENT_METHODS_BY_GATEWAY = {
    STRIPE: (
        {'method': 'card', 'label': 'Credit/Debit Card'},
        {'method': 'paypal', 'label': 'PayPal'},
        {'method': 'google_pay', 'label': 'Google Pay'},
        {'method': 'apple_pay', 'label': 'Apple Pay'},
    ),
    PADDLE: (
        {'method': 'card', 'label': 'Credit/Debit Card'},
        {'method': 'paypal', 'label': 'PayPal'},
    ),
}


class RecommendationError(Exception):
    """The country or its region has no usable gateway configuration."""


def available_payment_methods(gateway):
    """Payment methods a gateway supports, as dicts with ``method`` and ``label``."""
    return [dict(entry) for entry in PAYMENT_METHODS_BY_GATEWAY.get(gateway, ())]


def supports_payment_method(gateway, payment_method):
    return any(entry['method'] == payment_method for entry in PAYMENT_METHODS_BY_GATEWAY.get(gateway, ()))


def _available_gateways(config):
    split = float(config.split_percentage) if config.split_percentage is not None else None

    if config.gateway_type == GatewayType.STRIPE_ONLY.value:
        return [{'gateway': STRIPE, 'reason': config.recommendation_reason, 'recommended': True, 'split': False}]
    if config.gateway_type == GatewayType.PADDLE_ONLY.value:
        return [{'gateway': PADDLE, 'reason': config.recommendation_reason, 'recommended': True, 'split': False}]
    if config.gateway_type == GatewayType.SPLIT_50_50.value:
        return [
            {'gateway': gateway, 'reason': 'Supported with split routing', 'recommended': True,
             'split': True, 'split_percentage': split}
            for gateway in (STRIPE, PADDLE)
        ]

    # Unknown gateway types fall back to whatever the region enables
    gateways = []
    if config.stripe_enabled:
        gateways.append({'gateway': STRIPE, 'reason': config.recommendation_reason, 'recommended': True, 'split': False})
    if config.paddle_enabled:
        gateways.append({'gateway': PADDLE, 'reason': config.recommendation_reason, 'recommended': True, 'split': False})
    return gateways


def recommend_gateway(country_code, plan_id=None, default_currency='USD'):
    """
    Build the gateway recommendation for a country.

    Args:
        country_code (str): ISO country code of the payer
        plan_id (int, optional): Plan whose regional price should be included
        default_currency (str): Currency reported when no regional price exists

    Returns:
        dict: Region, gateway config, available gateways and regional price

    Raises:
        RecommendationError: Unknown country or region without gateway config
    """
    mapping = CountryRegion.by_country_code(country_code)
    if mapping is None:
        raise RecommendationError(f"Country code {country_code} not found")

    config = RegionGatewayConfig.for_region(mapping.region)
    if config is None:
        raise RecommendationError(f"No gateway config found for region {mapping.region}")

    regional_price = RegionalPrice.lookup(plan_id, mapping.region) if plan_id else None

    return {
        'country_code': mapping.country_code,
        'country_name': mapping.country_name,
        'region': mapping.region,
        'gateway_type': config.gateway_type,
        'stripe_enabled': config.stripe_enabled,
        'paddle_enabled': config.paddle_enabled,
        'split_percentage': float(config.split_percentage) if config.split_percentage is not None else None,
        'recommendation_reason': config.recommendation_reason,
        'regional_price': float(regional_price.price) if regional_price else None,
        'currency': regional_price.currency if regional_price else default_currency,
        'available_gateways': _available_gateways(config),
    }


def select_gateway(recommendation, chooser=random.random):
    """
    Pick the gateway a payment is routed to.

    Split regions send ``split_percentage`` percent of payments to Stripe
    (half when unset).

    Args:
        recommendation (dict): Result of ``recommend_gateway``
        chooser (callable): Returns a float in [0, 1)

    Returns:
        str or None: stripe, paddle, or None when the region enables neither
    """
    gateways = [entry['gateway'] for entry in recommendation['available_gateways']]
    if not gateways:
        return None
    if recommendation['gateway_type'] == GatewayType.SPLIT_50_50.value and len(gateways) > 1:
        share = recommendation['split_percentage']
        share = 50.0 if share is None else share
        return STRIPE if chooser() * 100 < share else PADDLE
    return gateways[0]
