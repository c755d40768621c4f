"""Registration and login endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from jobnest.api.limiter import limiter
from jobnest.api.schemas import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from jobnest.config import settings
from jobnest.db import get_db
from jobnest.security import create_access_token
from jobnest.services import users

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=201)
@limiter.limit(settings.auth_rate_limit)
def register(
    request: Request,
    data: RegisterRequest,
    db: Session = Depends(get_db),
):
    """Create an account and return an access token."""
    user = users.register(db, **data.model_dump())
    return AuthResponse(
        message="User registered successfully",
        token=create_access_token(user.id),
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
@limiter.limit(settings.auth_rate_limit)
def login(
    request: Request,
    data: LoginRequest,
    db: Session = Depends(get_db),
):
    """Exchange email and password for an access token."""
    user = users.verify_credentials(db, data.email, data.password)
    if not user:
        raise HTTPException(status_code=400, detail="Invalid credentials")

    return AuthResponse(
        message="Login successful",
        token=create_access_token(user.id),
        user=UserResponse.model_validate(user),
    )
