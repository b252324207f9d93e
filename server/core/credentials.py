# server/core/credentials.py

import logging
from sqlalchemy.orm import Session

from core.security import verify_password, get_password_hash, dummy_verify
from models.user import User


logger = logging.getLogger(__name__)


def find_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def authenticate_user(db: Session, username: str, password: str) -> User | None:
    """
    Returns the matching account, or None for an unknown username or a wrong password.
    Both failures take the same path through bcrypt so neither can be told apart.
    """
    user = find_by_username(db, username)
    if user is None:
        dummy_verify()
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def create_admin(db: Session, username: str, password: str, email: str | None = None) -> User | None:
    """
    Provisions an admin account. Returns None when the username is already taken.
    """
    if find_by_username(db, username) is not None:
        logger.info("Admin user '%s' already exists", username)
        return None

    user = User(username=username, password_hash=get_password_hash(password), email=email)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Admin user '%s' created", username)
    return user
