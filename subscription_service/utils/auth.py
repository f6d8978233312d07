"""
Authorization helpers and decorators.

Tokens are issued by the platform's auth service; this service only reads the
subject and the role claim.
"""
from functools import wraps

from flask import current_app
from flask_jwt_extended import get_jwt, get_jwt_identity, verify_jwt_in_request

MANAGER = 'manager'
ADMIN = 'admin'
PLAN_ADMIN_ROLES = (MANAGER, ADMIN)


def current_role():
    """Role claim of the verified token."""
    claim = current_app.config.get('JWT_ROLE_CLAIM', 'role')
    return get_jwt().get(claim)


def current_user_id():
    """Subject of the verified token."""
    return get_jwt_identity()


def roles_required(*allowed_roles):
    """
    Decorator that requires a valid JWT whose role claim is one of ``allowed_roles``.

    Returns:
        function: Decorator function
    """
    def wrapper(fn):
        @wraps(fn)
        def decorator(*args, **kwargs):
            verify_jwt_in_request()
            role = current_role()

            if role not in allowed_roles:
                current_app.logger.warning(
                    "Role %r denied access to %s (allowed: %s)", role, fn.__qualname__, ', '.join(allowed_roles)
                )
                return {
                    "message": "Insufficient permissions",
                    "required": list(allowed_roles),
                    "provided": role,
                }, 403

            return fn(*args, **kwargs)
        return decorator
    return wrapper
