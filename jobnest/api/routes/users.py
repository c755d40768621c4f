"""User profile endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobnest.api.deps import get_current_user
from jobnest.api.schemas import ProfileUpdate, UserResponse
from jobnest.db import User, get_db
from jobnest.services import users

router = APIRouter()


@router.get("/me", response_model=UserResponse)
def get_me(current_user: User = Depends(get_current_user)):
    """Get the caller's profile."""
    return UserResponse.model_validate(current_user)


@router.put("/profile", response_model=UserResponse)
def update_profile(
    data: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Update the caller's profile. Only provided fields change."""
    user = users.update_profile(db, current_user, data.model_dump(exclude_unset=True))
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get another user's public profile (chat headers, candidate views)."""
    return UserResponse.model_validate(users.get_user(db, user_id))
