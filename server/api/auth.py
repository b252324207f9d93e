# server/api/auth.py

import logging
from pydantic import BaseModel
from fastapi import APIRouter, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.credentials import authenticate_user
from core.errors import BadRequest, InvalidCredentials, Unauthenticated, Forbidden, ServerError
from core.security import Identity, issue_token, verify_token
from database import get_db


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class PublicUser(BaseModel):
    id: int
    username: str


class LoginResponse(BaseModel):
    token: str
    user: PublicUser


# -------------------------------
# Authorization Dependency
# -------------------------------

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Identity:
    """
    Resolves the bearer token on the request into an identity.
    No token -> 401; a token that fails verification for any reason -> 403.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()

    identity = verify_token(credentials.credentials)
    if identity is None:
        raise Forbidden()
    return identity


# -------------------------------
# Endpoints
# -------------------------------

@router.post("/login", response_model=LoginResponse)
def login(form_data: LoginRequest | None = None, db: Session = Depends(get_db)):
    if form_data is None or not form_data.username or not form_data.password:
        raise BadRequest("Username and password are required")

    try:
        user = authenticate_user(db, form_data.username, form_data.password)
    except SQLAlchemyError:
        logger.exception("Login lookup failed")
        raise ServerError("Server error during login")

    if user is None:
        raise InvalidCredentials("Invalid credentials")

    token = issue_token(user.id, user.username)
    logger.info("User '%s' logged in", user.username)
    return {"token": token, "user": {"id": user.id, "username": user.username}}


@router.get("/verify")
def verify(current_user: Identity = Depends(get_current_user)):
    return {
        "valid": True,
        "user": {
            **current_user.public(),
            "iat": int(current_user.issued_at.timestamp()),
            "exp": int(current_user.expires_at.timestamp()),
        },
    }
