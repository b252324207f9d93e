# server/core/security.py

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from core import config


pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


# -------------------------------
# Password Hashing
# -------------------------------

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def dummy_verify() -> None:
    """Spends the same time as a real verification when there is no stored hash."""
    pwd_context.dummy_verify()


# -------------------------------
# Token Service
# -------------------------------

@dataclass(frozen=True)
class Identity:
    id: int
    username: str
    issued_at: datetime
    expires_at: datetime

    def public(self) -> dict:
        return {"id": self.id, "username": self.username}


def issue_token(user_id: int, username: str, issued_at: datetime | None = None) -> str:
    """
    Signs a bearer token for the given identity.
    The token expires ACCESS_TOKEN_EXPIRE_HOURS after `issued_at` (defaults to now).
    """
    issued_at = issued_at or datetime.now(timezone.utc)
    expire = issued_at + timedelta(hours=config.ACCESS_TOKEN_EXPIRE_HOURS)
    to_encode = {
        "id": user_id,
        "username": username,
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(to_encode, config.JWT_SECRET_KEY, algorithm=config.ALGORITHM)


def verify_token(token: str) -> Identity | None:
    """
    Returns the identity carried by a valid token, or None.
    Bad signatures, malformed payloads and expired tokens all yield None.
    """
    try:
        payload = jwt.decode(
            token,
            config.JWT_SECRET_KEY,
            algorithms=[config.ALGORITHM],
            options={"require_exp": True, "require_iat": True},
        )
    except JWTError:
        return None

    user_id = payload.get("id")
    username = payload.get("username")
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        return None
    if not isinstance(username, str) or not username:
        return None

    return Identity(
        id=user_id,
        username=username,
        issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
        expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
    )
