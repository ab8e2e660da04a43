from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.deps import ensure_admin, ensure_admin_or_correct_user
from app.core.security import create_token
from app.crud import user as user_crud
from app.schemas.common import DeletedResponse
from app.schemas.user import (
    UserCreateRequest,
    UserCreatedResponse,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    status_code=201,
    response_model=UserCreatedResponse,
    dependencies=[Depends(ensure_admin)],
)
def create_user(
    request: UserCreateRequest,
    db: Session = Depends(get_db),
    config: Settings = Depends(get_settings)
):
    """
    Create a user, optionally an admin, and return it with a token.

    Authorization required: admin
    """
    user = user_crud.register(db, request)
    token = create_token(user.username, user.is_admin, config)
    return {"user": user, "token": token}


@router.get("", response_model=UserListResponse, dependencies=[Depends(ensure_admin)])
def list_users(db: Session = Depends(get_db)):
    """List all users. Authorization required: admin"""
    return {"users": user_crud.find_all(db)}


@router.get(
    "/{username}",
    response_model=UserResponse,
    dependencies=[Depends(ensure_admin_or_correct_user)],
)
def get_user(username: str, db: Session = Depends(get_db)):
    """Retrieve a user. Authorization required: admin or same user"""
    return {"user": user_crud.get(db, username)}


@router.patch(
    "/{username}",
    response_model=UserResponse,
    dependencies=[Depends(ensure_admin_or_correct_user)],
)
def update_user(
    username: str,
    request: UserUpdateRequest,
    db: Session = Depends(get_db)
):
    """
    Partially update a user: any of password, firstName, lastName, email.

    Authorization required: admin or same user
    """
    data = request.model_dump(exclude_unset=True, by_alias=True)
    return {"user": user_crud.update(db, username, data)}


@router.delete(
    "/{username}",
    response_model=DeletedResponse,
    dependencies=[Depends(ensure_admin_or_correct_user)],
)
def delete_user(username: str, db: Session = Depends(get_db)):
    """Delete a user. Authorization required: admin or same user"""
    user_crud.remove(db, username)
    return {"deleted": username}
