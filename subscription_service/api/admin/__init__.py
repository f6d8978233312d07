"""
Admin namespace for payment gateway configuration and processing fees.
"""
from flask_restx import Namespace

admin_ns = Namespace(
    'admin',
    description='Gateway configuration and processing fee operations'
)

from . import routes  # noqa: E402,F401
