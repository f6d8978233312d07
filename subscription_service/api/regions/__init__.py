"""
Country-region namespace for the country to pricing region mapping.
"""
from flask_restx import Namespace

region_ns = Namespace(
    'country-region',
    description='Country to pricing region mapping operations'
)

from . import routes  # noqa: E402,F401
