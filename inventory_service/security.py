# inventory_service/security.py

"""
Session tokens and credential verification.

A session is a signed JWT carried in an HTTP-only cookie (or a bearer
header for API clients). `authenticated` is the only question the product
routes ever ask about it.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Protocol

from fastapi import Request
from fastapi.security.utils import get_authorization_scheme_param
from jwt import InvalidTokenError, decode, encode

from .config import ALGORITHM, SECRET_KEY, SESSION_COOKIE_NAME, SESSION_EXPIRE_MINUTES
from .schemas import Identity

logger = logging.getLogger(__name__)


class CredentialVerifier(Protocol):
    def verify(self, username: str, password: str) -> Optional[Identity]:
        ...


class DemoCredentialVerifier:
    """
    Accepts exactly one built-in username/password pair.
    Stands in for a real credential store; swap it through `get_credential_verifier`.
    """

    USERNAME = "admin"
    PASSWORD = "admin"
    IDENTITY = Identity(id="1", name="Administrador", email="admin@example.com")

    def verify(self, username: str, password: str) -> Optional[Identity]:
        if username == self.USERNAME and password == self.PASSWORD:
            return self.IDENTITY
        return None


def get_credential_verifier() -> CredentialVerifier:
    return DemoCredentialVerifier()


def create_session_token(identity: Identity) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=SESSION_EXPIRE_MINUTES)
    claims = {
        "sub": identity.id,
        "name": identity.name,
        "email": identity.email,
        "exp": expire,
    }
    return encode(claims, SECRET_KEY, algorithm=ALGORITHM)


def decode_session_token(token: str) -> Optional[Identity]:
    try:
        claims = decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except InvalidTokenError as e:
        logger.info(f"Rejected session token: {e}")
        return None
    subject = claims.get("sub")
    if not subject:
        return None
    return Identity(
        id=str(subject),
        name=claims.get("name", ""),
        email=claims.get("email", ""),
    )


def _request_token(request: Request) -> Optional[str]:
    token = request.cookies.get(SESSION_COOKIE_NAME)
    if token:
        return token
    scheme, param = get_authorization_scheme_param(request.headers.get("Authorization"))
    if scheme.lower() == "bearer" and param:
        return param
    return None


def authenticated(request: Request) -> Optional[Identity]:
    """
    Returns the signed-in identity for this request, or None.
    Reads request credentials only; never issues or refreshes tokens.
    """
    token = _request_token(request)
    if token is None:
        return None
    return decode_session_token(token)
