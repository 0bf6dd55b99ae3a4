"""Authentication endpoints: signup, login and current user."""

import logging
from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..config import Settings, get_settings
from ..database import get_db
from ..models.user import User
from .dependencies import CurrentUser
from .jwt import create_access_token, get_jwt_expiry_minutes
from .password import hash_password, verify_password, validate_password_strength
from .roles import UserRole
from .schemas import AuthResponse, LoginRequest, SignupRequest, UserResponse
from .service import email_in_domain, find_user_by_login

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _issue_token(user: User, message: str) -> AuthResponse:
    token = create_access_token(
        user_id=user.id,
        username=user.username,
        role=user.role,
        email=user.email
    )
    return AuthResponse(
        message=message,
        token=token,
        expires_in=get_jwt_expiry_minutes() * 60,
        user=UserResponse.model_validate(user),
    )


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(
    data: SignupRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Create an account for a campus member and return an access token.

    Raises:
        HTTPException 400: Email outside the institutional domain, or weak password
        HTTPException 409: Username or email already registered
    """
    if not email_in_domain(data.email, settings.ALLOWED_EMAIL_DOMAIN):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Only @{settings.ALLOWED_EMAIL_DOMAIN} accounts are allowed."
        )

    is_valid, error_msg = validate_password_strength(data.password)
    if not is_valid:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error_msg)

    existing = db.query(User).filter(
        or_(User.username == data.username, User.email == data.email.lower())
    ).first()
    if existing:
        field = "Username" if existing.username == data.username else "Email"
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"{field} already exists"
        )

    user = User(
        username=data.username,
        email=data.email,
        password_hash=hash_password(data.password),
        role=UserRole.USER.value,
        status="ACTIVE",
        last_login_at=datetime.now(timezone.utc),
    )

    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User creation failed due to constraint violation"
        )

    logger.info(f"User signed up: {user.username}", extra={"user_id": user.id})
    return _issue_token(user, "User created successfully")


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
):
    """Authenticate with username (or email) and password.

    Raises:
        HTTPException 401: Invalid credentials or disabled account
    """
    user = find_user_by_login(db, credentials.username)

    if not user or not verify_password(credentials.password, user.password_hash):
        logger.warning(f"Failed login for {credentials.username}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        )

    if user.status == "DISABLED":
        logger.warning(f"Login attempt on disabled account {user.username}", extra={"user_id": user.id})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Account is disabled"
        )

    user.last_login_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(user)

    return _issue_token(user, "Login successful")


@router.get("/me", response_model=UserResponse)
def get_me(current_user: CurrentUser):
    """Return the user identified by the bearer token."""
    return current_user
