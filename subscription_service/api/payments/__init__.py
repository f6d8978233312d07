"""
Payments namespace for gateway recommendations and payment records.
"""
from flask_restx import Namespace

payment_ns = Namespace(
    'payments',
    description='Gateway recommendation and payment operations'
)

from . import routes  # noqa: E402,F401
