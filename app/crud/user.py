"""
CRUD operations for User model, plus password authentication.
"""

import logging
from typing import Any, Dict, List
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.core.errors import BadRequestError, NotFoundError, UnauthorizedError
from app.core.security import get_password_hash, verify_password
from app.crud.base import update_row
from app.models.user import User
from app.schemas.user import UserCreateRequest, UserRegisterRequest

logger = logging.getLogger(__name__)

COLUMN_MAP = {
    "firstName": "first_name",
    "lastName": "last_name",
}


def authenticate(db: Session, username: str, password: str) -> User:
    """
    Check a username/password pair.

    Raises:
        UnauthorizedError: If the user is unknown or the password is wrong
    """
    user = db.get(User, username)
    if not user or not verify_password(password, user.password):
        logger.warning(f"Failed login for {username}")
        raise UnauthorizedError("Invalid username/password")

    return user


def register(db: Session, user_data: UserRegisterRequest) -> User:
    """
    Create a user with a hashed password.

    Self-registration (UserRegisterRequest) always creates a non-admin;
    admins can pass a UserCreateRequest with is_admin set.

    Raises:
        BadRequestError: If the username is taken
    """
    if db.get(User, user_data.username):
        raise BadRequestError(f"Duplicate username: {user_data.username}")

    is_admin = user_data.is_admin if isinstance(user_data, UserCreateRequest) else False

    db_user = User(
        username=user_data.username,
        password=get_password_hash(user_data.password),
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        email=user_data.email,
        is_admin=is_admin,
    )

    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise BadRequestError(f"Duplicate username: {user_data.username}")
    db.refresh(db_user)

    logger.info(f"Registered user {db_user.username} (admin: {db_user.is_admin})")
    return db_user


def find_all(db: Session) -> List[User]:
    """Retrieve all users ordered by username."""
    return list(db.scalars(select(User).order_by(User.username)))


def get(db: Session, username: str) -> User:
    """
    Retrieve a user by username.

    Raises:
        NotFoundError: If no user has this username
    """
    user = db.get(User, username)

    if not user:
        raise NotFoundError(f"No user: {username}")

    return user


def update(db: Session, username: str, data: Dict[str, Any]) -> User:
    """
    Partially update a user; a new password is hashed before storing.

    Raises:
        BadRequestError: If data is empty or violates a constraint
        NotFoundError: If no user has this username
    """
    data = dict(data)
    if data.get("password"):
        data["password"] = get_password_hash(data["password"])

    try:
        updated = update_row(db, User.__table__, "username", username, data, COLUMN_MAP)
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Rejected update for user {username}: {e.orig}")
        raise BadRequestError("Invalid user data")

    if not updated:
        db.rollback()
        raise NotFoundError(f"No user: {username}")

    db.commit()
    logger.info(f"Updated user {username}: {', '.join(data)}")

    return db.get(User, username)


def remove(db: Session, username: str) -> None:
    """
    Delete a user.

    Raises:
        NotFoundError: If no user has this username
    """
    user = db.get(User, username)
    if not user:
        raise NotFoundError(f"No user: {username}")

    db.delete(user)
    db.commit()

    logger.info(f"Deleted user {username}")
