# inventory_service/routers/auth.py

"""
Session routes for the demo sign-in flow.
"""
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Response
from pydantic import ValidationError

from ..config import SESSION_COOKIE_NAME, SESSION_COOKIE_SECURE, SESSION_EXPIRE_MINUTES
from ..exceptions import BadRequestError, UnauthorizedError
from ..schemas import Identity, LoginRequest, LoginResponse, SessionResponse
from ..security import (
    CredentialVerifier,
    authenticated,
    create_session_token,
    get_credential_verifier,
)
from .common import read_json_body

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse, summary="Sign in with username and password")
def login(
    response: Response,
    body: Any = Depends(read_json_body),
    verifier: CredentialVerifier = Depends(get_credential_verifier),
):
    """
    Verifies the submitted credentials and starts a session.
    The token is returned in the body and set as an HTTP-only cookie.
    """
    try:
        credentials = LoginRequest.model_validate(body)
    except ValidationError:
        raise BadRequestError("username and password are required")

    identity = verifier.verify(credentials.username, credentials.password)
    if identity is None:
        logger.warning(f"Failed login for user '{credentials.username}'.")
        raise UnauthorizedError("invalid credentials")

    token = create_session_token(identity)
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=token,
        max_age=SESSION_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
        secure=SESSION_COOKIE_SECURE,
    )
    logger.info(f"User '{identity.id}' signed in.")
    return LoginResponse(access_token=token, user=identity)


@router.get("/session", response_model=SessionResponse, summary="Current session")
def read_session(identity: Optional[Identity] = Depends(authenticated)):
    if identity is None:
        raise UnauthorizedError()
    return SessionResponse(user=identity)


@router.post("/logout", summary="Sign out")
def logout(response: Response):
    response.delete_cookie(
        key=SESSION_COOKIE_NAME,
        httponly=True,
        samesite="lax",
        secure=SESSION_COOKIE_SECURE,
    )
    return {"success": True}
