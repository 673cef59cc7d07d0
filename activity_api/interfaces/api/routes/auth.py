"""Endpoints related to authentication."""

from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from activity_api.application.use_cases.users import AuthenticationStatus, authenticate_user
from activity_api.config import get_settings
from activity_api.infrastructure.database import get_db
from activity_api.infrastructure.security import create_access_token
from activity_api.interfaces.api.schemas import Token

router = APIRouter(prefix="/auth", tags=["auth"])
settings = get_settings()

@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    """Authenticate a member by e-mail address and return a JWT."""

    result = authenticate_user(db, form_data.username, form_data.password)

    if result.status is AuthenticationStatus.INVALID_CREDENTIALS:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if result.status is AuthenticationStatus.INACTIVE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Inactive user",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = result.user
    access_token = create_access_token(
        data={"sub": user.email, "role": user.role.alias},
        expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
    )
    return {
        "access_token": access_token,
        "token_type": "bearer",
        "role": user.role.alias,
    }


__all__ = ["router"]
