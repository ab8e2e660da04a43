"""
FastAPI dependencies for authentication and authorization.

authenticate_jwt fills request.state.user from the bearer token, if any.
The ensure_* gates build on it and raise UnauthorizedError to stop the
request before the route handler runs:

    @router.post("", dependencies=[Depends(ensure_admin)])
"""

import logging
from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError

from app.core.config import Settings, get_settings
from app.core.errors import UnauthorizedError
from app.core.security import TokenPayload, decode_token

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme (Authorization: Bearer <token>); a missing or
# malformed header yields None instead of an error
bearer_scheme = HTTPBearer(auto_error=False)


def authenticate_jwt(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    config: Settings = Depends(get_settings),
) -> Optional[TokenPayload]:
    """
    Decode the bearer token, if one was sent, into request.state.user.

    A missing or invalid token is not an error here: the identity slot is
    left as None and the gates decide what that means.
    """
    request.state.user = None

    if credentials:
        try:
            request.state.user = decode_token(credentials.credentials, config)
        except JWTError as e:
            logger.debug(f"Ignoring invalid token: {e}")

    return request.state.user


def ensure_logged_in(
    user: Optional[TokenPayload] = Depends(authenticate_jwt),
) -> TokenPayload:
    """
    Require any valid token.

    Raises:
        UnauthorizedError: If no valid token was provided
    """
    if user is None:
        raise UnauthorizedError()
    return user


def ensure_admin(
    user: TokenPayload = Depends(ensure_logged_in),
) -> TokenPayload:
    """
    Require a valid token whose isAdmin claim is true.

    Raises:
        UnauthorizedError: If not logged in or not an admin
    """
    if user.isAdmin is not True:
        raise UnauthorizedError()
    return user


def ensure_admin_or_correct_user(
    username: str,
    user: TokenPayload = Depends(ensure_logged_in),
) -> TokenPayload:
    """
    Require an admin, or the user named by the {username} path parameter.

    Raises:
        UnauthorizedError: If neither condition holds
    """
    if user.isAdmin is True or user.username == username:
        return user
    raise UnauthorizedError()
