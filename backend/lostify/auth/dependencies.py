"""FastAPI dependencies for authentication and authorization.

Usage:
    @router.get("/my-posts")
    def my_posts(user: User = Depends(get_current_user)):
        ...

    @router.get("/admin/all")
    def all_posts(admin: User = Depends(get_current_admin)):
        ...
"""

from typing import Annotated, Callable
from uuid import UUID

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.user import User
from .jwt import decode_token
from .roles import UserRole, has_permission


# HTTP Bearer token security scheme
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """Validate the bearer token and return the authenticated user.

    Raises:
        HTTPException 401: Missing, invalid or expired token, or unknown user
        HTTPException 403: User account is disabled
    """
    if credentials is None:
        raise _unauthorized("No token provided")

    try:
        payload = decode_token(credentials.credentials)

        user_id_str = payload.get("sub")
        if not user_id_str:
            raise _unauthorized("Token missing required fields - please log in again")

        user_id = UUID(user_id_str)

    except jwt.ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except jwt.InvalidTokenError as e:
        raise _unauthorized(f"Invalid token: {str(e)}")
    except ValueError as e:
        raise _unauthorized(f"Invalid token claims: {str(e)}")

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise _unauthorized("User not found")

    if user.status != "ACTIVE":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is disabled",
        )

    return user


def require_role(required_role: UserRole) -> Callable:
    """Create a dependency that enforces a minimum role.

    Raises:
        HTTPException 403: If the user's role is insufficient
    """

    def role_dependency(current_user: User = Depends(get_current_user)) -> User:
        try:
            user_role = UserRole(current_user.role)
        except ValueError:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Invalid user role: {current_user.role}",
            )

        if not has_permission(user_role, required_role):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Admin access required" if required_role == UserRole.ADMIN
                else f"Insufficient permissions. Required role: {required_role.value}",
            )

        return current_user

    return role_dependency


def get_current_admin(current_user: User = Depends(require_role(UserRole.ADMIN))) -> User:
    """Convenience dependency for ADMIN-only endpoints."""
    return current_user


# Type aliases for dependency injection
CurrentUser = Annotated[User, Depends(get_current_user)]
CurrentAdmin = Annotated[User, Depends(get_current_admin)]
