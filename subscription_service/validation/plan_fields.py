"""
Field authorization for subscription plan updates.

A plan is updated through one of two endpoints. The editable-fields endpoint
accepts only the billing and capacity knobs in ``EDITABLE_FIELDS``; the
general endpoint accepts everything else. Each endpoint checks against the
other's set on its own, so a field always belongs to exactly one of them.
"""
from enum import Enum

from .errors import InvalidFieldError, WrongChannelError

EDITABLE_FIELDS = (
    'max_elections',
    'max_voters_per_election',
    'processing_fee_mandatory',
    'processing_fee_fixed_amount',
    'processing_fee_type',
    'processing_fee_percentage',
)
EDITABLE_FIELD_SET = frozenset(EDITABLE_FIELDS)

# Plan attributes the general endpoint knows how to store
GENERAL_FIELDS = (
    'name',
    'type',
    'price',
    'duration',
    'description',
    'what_included',
    'what_excluded',
    'is_active',
    'display_order',
    'processing_fee_enabled',
)

EDITABLE_FIELDS_ENDPOINT = '/plans/:planId/editable-fields'


class PlanUpdateChannel(Enum):
    """The endpoint a plan update belongs to."""
    EDITABLE = "editable"
    GENERAL = "general"


class UnknownFieldPolicy(Enum):
    """What the general endpoint does with fields outside ``GENERAL_FIELDS``."""
    REJECT = "reject"
    IGNORE = "ignore"


def parse_unknown_field_policy(value):
    """
    Policy from its configured name, case-insensitive.

    Raises:
        ValueError: Not a known policy name
    """
    if isinstance(value, UnknownFieldPolicy):
        return value
    return UnknownFieldPolicy(str(value).strip().lower())


def channel_for(payload):
    """
    Channel a payload belongs to.

    Args:
        payload (Mapping): Inbound update body

    Returns:
        PlanUpdateChannel: EDITABLE when any key is an editable field
    """
    if EDITABLE_FIELD_SET.intersection(payload):
        return PlanUpdateChannel.EDITABLE
    return PlanUpdateChannel.GENERAL


def route_editable_update(payload):
    """
    Accept a payload for the editable-fields endpoint.

    Args:
        payload (Mapping): Inbound update body

    Returns:
        dict: The editable fields present in the payload with their values.
            Fields the payload leaves out are absent, not defaulted.

    Raises:
        InvalidFieldError: Any key is not an editable field. Nothing is applied.
    """
    invalid = [name for name in payload if name not in EDITABLE_FIELD_SET]
    if invalid:
        raise InvalidFieldError(invalid, EDITABLE_FIELDS)

    return {name: payload[name] for name in EDITABLE_FIELDS if name in payload}


def route_general_update(payload):
    """
    Check a payload for the general update endpoint.

    Raises:
        WrongChannelError: The payload carries editable fields, which must go
            through ``EDITABLE_FIELDS_ENDPOINT``.
    """
    if channel_for(payload) is PlanUpdateChannel.EDITABLE:
        overlap = [name for name in EDITABLE_FIELDS if name in payload]
        raise WrongChannelError(overlap, EDITABLE_FIELDS_ENDPOINT)


def filter_general_fields(payload, policy=UnknownFieldPolicy.REJECT):
    """
    Split a general update payload into storable and unknown fields.

    Call after ``route_general_update``.

    Args:
        payload (Mapping): Inbound update body
        policy (UnknownFieldPolicy or str): How to treat unknown fields

    Returns:
        tuple: (dict of accepted fields, list of ignored field names)

    Raises:
        InvalidFieldError: Unknown fields under the reject policy
    """
    policy = parse_unknown_field_policy(policy)
    unknown = [name for name in payload if name not in GENERAL_FIELDS]

    if unknown and policy is UnknownFieldPolicy.REJECT:
        raise InvalidFieldError(
            unknown,
            GENERAL_FIELDS,
            message=(
                f"Unsupported fields: {', '.join(unknown)}. "
                f"Plan fields that can be updated here: {', '.join(GENERAL_FIELDS)}"
            ),
        )

    accepted = {name: payload[name] for name in GENERAL_FIELDS if name in payload}
    return accepted, unknown
