"""
Structural checks for inbound payloads.

Every validator runs all of its checks and returns the full list of
violation messages in a fixed order; an empty list means the payload is
accepted. Types are checked as sent, nothing is coerced.
"""
import math

from subscription_service.models.subscription_plan import PlanDuration, PlanType, ProcessingFeeType

PLAN_DURATIONS = frozenset(PlanDuration.values())
PLAN_TYPES = frozenset(PlanType.values())
PROCESSING_FEE_TYPES = frozenset(ProcessingFeeType.values())
PAYMENT_METHODS = frozenset(('card', 'paypal', 'google_pay', 'apple_pay'))


def is_number(value):
    """Finite int or float, but not bool. NaN and infinities are not numbers."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def is_text(value):
    return isinstance(value, str) and value.strip() != ''


def _is_whole(value):
    return is_number(value) and (isinstance(value, int) or value.is_integer())


def _check_name(value):
    return is_text(value)


def _check_price(value):
    return is_number(value) and value > 0


def _check_duration(value):
    return isinstance(value, str) and value in PLAN_DURATIONS


def _check_type(value):
    return isinstance(value, str) and value in PLAN_TYPES


# (field, predicate, message) in reporting order
PLAN_CHECKS = (
    ('name', _check_name, 'Valid plan name required'),
    ('price', _check_price, 'Valid price required'),
    ('duration', _check_duration, 'Valid duration required'),
    ('type', _check_type, 'Valid type required'),
    ('max_elections', is_number, 'Valid max_elections required'),
    ('max_voters_per_election', is_number, 'Valid max_voters_per_election required'),
)


def validate_plan_creation(payload):
    """
    Check a new plan payload.

    Args:
        payload (Mapping): Inbound body

    Returns:
        list: Violation messages, empty when the plan can be created
    """
    return [message for field, check, message in PLAN_CHECKS
            if not check(payload.get(field))]


def validate_plan_update(fields):
    """
    Check the values of a general plan update.

    Only fields present in ``fields`` are checked, with the creation rules.
    """
    errors = [message for field, check, message in PLAN_CHECKS
              if field in fields and not check(fields[field])]

    if 'is_active' in fields and not isinstance(fields['is_active'], bool):
        errors.append('is_active must be boolean')
    if 'processing_fee_enabled' in fields and not isinstance(fields['processing_fee_enabled'], bool):
        errors.append('processing_fee_enabled must be boolean')
    if 'display_order' in fields and not _is_whole(fields['display_order']):
        errors.append('display_order must be an integer')
    for field in ('description', 'what_included', 'what_excluded'):
        if fields.get(field) is not None and not isinstance(fields[field], str):
            errors.append(f'{field} must be string')
    return errors


def validate_editable_values(fields):
    """
    Check the values of an editable-fields update.

    ``None`` clears a field, except for the boolean ``processing_fee_mandatory``.
    """
    errors = []

    for field in ('max_elections', 'max_voters_per_election'):
        if field in fields and fields[field] is not None and not is_number(fields[field]):
            errors.append(f'{field} must be a number')

    if 'processing_fee_mandatory' in fields and not isinstance(fields['processing_fee_mandatory'], bool):
        errors.append('processing_fee_mandatory must be boolean')

    fee_type = fields.get('processing_fee_type')
    if fee_type is not None and not (isinstance(fee_type, str) and fee_type in PROCESSING_FEE_TYPES):
        errors.append(f"processing_fee_type must be one of: {', '.join(sorted(PROCESSING_FEE_TYPES))}")

    amount = fields.get('processing_fee_fixed_amount')
    if amount is not None and not (is_number(amount) and amount >= 0):
        errors.append('processing_fee_fixed_amount must be a non-negative number')

    percentage = fields.get('processing_fee_percentage')
    if percentage is not None and not (is_number(percentage) and 0 <= percentage <= 100):
        errors.append('processing_fee_percentage must be a number between 0 and 100')

    return errors


def validate_payment_submission(payload):
    """
    Check a payment creation payload.

    Returns:
        list: Violation messages, empty when the payment can proceed
    """
    errors = []

    amount = payload.get('amount')
    if not (is_number(amount) and amount > 0):
        errors.append('Valid amount required')
    if not is_text(payload.get('currency')):
        errors.append('Valid currency required')
    if not is_text(payload.get('country_code')):
        errors.append('Valid country_code required')
    if not payload.get('planId'):
        errors.append('Plan ID required')

    payment_method = payload.get('payment_method')
    if payment_method is not None and not (isinstance(payment_method, str) and payment_method in PAYMENT_METHODS):
        errors.append('Invalid payment method')

    return errors


def validate_gateway_config(payload, region_id):
    """
    Check a regional gateway configuration.

    Args:
        payload (Mapping): Inbound body
        region_id (str): Region from the route, not the body

    Returns:
        list: Violation messages, empty when the config can be stored
    """
    errors = []

    if not region_id:
        errors.append('Region required')
    if not payload.get('gateway_type'):
        errors.append('Gateway type required')
    if not isinstance(payload.get('stripe_enabled'), bool):
        errors.append('stripe_enabled must be boolean')
    if not isinstance(payload.get('paddle_enabled'), bool):
        errors.append('paddle_enabled must be boolean')

    reason = payload.get('recommendation_reason')
    if reason is not None and not isinstance(reason, str):
        errors.append('Recommendation reason must be string')

    split = payload.get('split_percentage')
    if split is not None and not (is_number(split) and 0 <= split <= 100):
        errors.append('split_percentage must be a number between 0 and 100')

    return errors


def validate_regional_prices(prices):
    """
    Check a batch of regional prices.

    Args:
        prices: Region code mapped to a price, or to ``{"price", "currency"}``

    Returns:
        list: Violation messages, empty when every row can be stored
    """
    if not isinstance(prices, dict) or not prices:
        return ['prices must be a non-empty object keyed by region']

    errors = []
    for region, entry in prices.items():
        price = entry.get('price') if isinstance(entry, dict) else entry
        if not (is_number(price) and price > 0):
            errors.append(f'Valid price required for region {region}')
        if isinstance(entry, dict) and entry.get('currency') is not None and not is_text(entry['currency']):
            errors.append(f'Valid currency required for region {region}')
    return errors


def validate_usage_submission(payload):
    """
    Check a pay-as-you-go usage record.

    ``quantity`` defaults to 1 and ``usage_type`` to ``election_created`` when
    left out.

    Returns:
        list: Violation messages, empty when the usage can be recorded
    """
    errors = []

    quantity = payload.get('quantity', 1)
    if not (_is_whole(quantity) and quantity > 0):
        errors.append('quantity must be a positive integer')

    usage_type = payload.get('usage_type', 'election_created')
    if not is_text(usage_type):
        errors.append('usage_type must be a non-empty string')

    election_id = payload.get('election_id')
    if election_id is not None and not (is_text(election_id) or
                                        (isinstance(election_id, int) and not isinstance(election_id, bool))):
        errors.append('election_id must be a string or an integer')

    return errors
