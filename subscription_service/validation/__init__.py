"""
Request validation and field authorization for plan and payment payloads.
"""
from .errors import InvalidFieldError, PlanRequestError, ValidationError, WrongChannelError
from .payloads import (
    validate_editable_values,
    validate_gateway_config,
    validate_payment_submission,
    validate_plan_creation,
    validate_plan_update,
    validate_regional_prices,
    validate_usage_submission,
)
from .plan_fields import (
    EDITABLE_FIELDS,
    EDITABLE_FIELD_SET,
    EDITABLE_FIELDS_ENDPOINT,
    GENERAL_FIELDS,
    PlanUpdateChannel,
    UnknownFieldPolicy,
    channel_for,
    filter_general_fields,
    parse_unknown_field_policy,
    route_editable_update,
    route_general_update,
)

__all__ = [
    'EDITABLE_FIELDS',
    'EDITABLE_FIELD_SET',
    'EDITABLE_FIELDS_ENDPOINT',
    'GENERAL_FIELDS',
    'InvalidFieldError',
    'PlanRequestError',
    'PlanUpdateChannel',
    'UnknownFieldPolicy',
    'ValidationError',
    'WrongChannelError',
    'channel_for',
    'filter_general_fields',
    'parse_unknown_field_policy',
    'route_editable_update',
    'route_general_update',
    'validate_editable_values',
    'validate_gateway_config',
    'validate_payment_submission',
    'validate_plan_creation',
    'validate_plan_update',
    'validate_regional_prices',
    'validate_usage_submission',
]
