"""
JSON utility functions for the API.
"""
import decimal
from datetime import date, datetime

from flask import request


def convert_decimal_in_dict(obj):
    """
    Recursively convert values JSON cannot carry into ones it can.

    Decimal becomes float, datetime and date become ISO strings.

    Args:
        obj: Dictionary, list, or scalar value to process

    Returns:
        Same structure with converted values
    """
    if isinstance(obj, dict):
        return {k: convert_decimal_in_dict(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [convert_decimal_in_dict(item) for item in obj]
    elif isinstance(obj, decimal.Decimal):
        return float(obj)
    elif isinstance(obj, (datetime, date)):
        return obj.isoformat()
    return obj


def json_body():
    """
    Request body as a dict, or None when it is missing or not a JSON object.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None
    return data
