# server/models/user.py

from sqlalchemy import Column, Integer, String
from . import Base, UTCDateTime, utcnow


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for admin accounts.
    Stores username and bcrypt password hash; provisioned by the admin CLI only.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    email = Column(String(100), nullable=True)
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
