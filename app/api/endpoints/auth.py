"""
Authentication endpoints.

- POST /auth/token: Exchange username/password for a JWT
- POST /auth/register: Create a (non-admin) account and return a JWT
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.security import create_token
from app.crud import user as user_crud
from app.schemas.user import TokenResponse, UserAuthRequest, UserRegisterRequest

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/token", response_model=TokenResponse)
def get_token(
    request: UserAuthRequest,
    db: Session = Depends(get_db),
    config: Settings = Depends(get_settings)
):
    """Authenticate a user and return a signed token."""
    user = user_crud.authenticate(db, request.username, request.password)
    token = create_token(user.username, user.is_admin, config)
    return TokenResponse(token=token)


@router.post("/register", status_code=201, response_model=TokenResponse)
def register(
    request: UserRegisterRequest,
    db: Session = Depends(get_db),
    config: Settings = Depends(get_settings)
):
    """Register a new user and return a signed token for immediate use."""
    user = user_crud.register(db, request)
    token = create_token(user.username, user.is_admin, config)
    return TokenResponse(token=token)
