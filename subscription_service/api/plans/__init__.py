"""
Plans namespace for subscription plans and their regional prices.
"""
from flask_restx import Namespace

plan_ns = Namespace(
    'plans',
    description='Subscription plans operations'
)

from . import routes  # noqa: E402,F401
