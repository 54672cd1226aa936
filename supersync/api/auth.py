"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from supersync.api.dependencies import get_current_user
from supersync.database import get_db
from supersync.models.user import User
from supersync.schemas.auth import (
    AuthResponse,
    ProfileResponse,
    ProfileUpdate,
    ProfileUpdateResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from supersync.services.auth import (
    authenticate_user,
    create_access_token,
    get_profile,
    register_user,
    update_profile,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    user = register_user(
        db, user_data.email, user_data.password, user_data.name, user_data.company
    )

    return AuthResponse(
        message="User created successfully",
        token=create_access_token(user.id, user.email),
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)

    return AuthResponse(
        message="Login successful",
        token=create_access_token(user.id, user.email),
        user=UserResponse.model_validate(user),
    )


@router.get("/profile", response_model=ProfileResponse)
def get_my_profile(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get current user information."""
    user = get_profile(db, current_user.id)
    return ProfileResponse(user=UserResponse.model_validate(user))


@router.put("/profile", response_model=ProfileUpdateResponse)
def update_my_profile(
    profile_data: ProfileUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update name and/or company."""
    user = update_profile(db, current_user.id, profile_data.name, profile_data.company)
    return ProfileUpdateResponse(
        message="Profile updated successfully",
        user=UserResponse.model_validate(user),
    )
