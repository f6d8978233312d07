"""
Subscriptions namespace for the caller's own subscription status.
"""
from flask_restx import Namespace

subscription_ns = Namespace(
    'subscriptions',
    description='User subscription status operations'
)

from . import routes  # noqa: E402,F401
