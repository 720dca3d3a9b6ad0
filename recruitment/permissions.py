# recruitment/permissions.py
from functools import wraps

from flask_jwt_extended import get_jwt, verify_jwt_in_request

from recruitment.errors import PermissionDeniedError

READ = "recruitment:read"
CREATE = "recruitment:create"
UPDATE = "recruitment:update"
DELETE = "recruitment:delete"

ROLE_PERMISSIONS = {
    "admin": frozenset({READ, CREATE, UPDATE, DELETE}),
    "hr": frozenset({READ, CREATE, UPDATE, DELETE}),
    "manager": frozenset({READ, UPDATE}),
    "employee": frozenset(),
}


def has_permission(role, permission):
    return permission in ROLE_PERMISSIONS.get(role, frozenset())


def permission_required(permission):
    """Require a valid JWT whose ``role`` claim grants ``permission``."""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            verify_jwt_in_request()
            claims = get_jwt()
            if not has_permission(claims.get("role"), permission):
                raise PermissionDeniedError(f"Missing permission {permission}")
            return fn(*args, **kwargs)
        return wrapper
    return decorator
