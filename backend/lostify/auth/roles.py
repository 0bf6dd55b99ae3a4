"""User roles and permission hierarchy.

- ADMIN: moderates posts, manages users, triages feedback, views analytics
- USER: creates and manages their own posts, receives matches
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles. Values are stored as TEXT and must match exactly."""
    ADMIN = "ADMIN"
    USER = "USER"


# Each role includes the permissions of all roles below it
ROLE_HIERARCHY = {
    UserRole.ADMIN: {UserRole.ADMIN, UserRole.USER},
    UserRole.USER: {UserRole.USER},
}


def has_permission(user_role: UserRole, required_role: UserRole) -> bool:
    """Check if `user_role` satisfies `required_role`.

    Examples:
        >>> has_permission(UserRole.ADMIN, UserRole.USER)
        True
        >>> has_permission(UserRole.USER, UserRole.ADMIN)
        False
    """
    return required_role in ROLE_HIERARCHY.get(user_role, set())
