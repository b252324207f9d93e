# server/models/image.py

from sqlalchemy import Column, Integer, String, Enum
from . import Base, UTCDateTime, utcnow


CATEGORIES = (
    "shortfilms",
    "photography",
    "behind",
    "commercials",
    "documentaries",
    "music",
)

URL_MAX_LENGTH = 500
TITLE_MAX_LENGTH = 255


class Image(Base):
    __tablename__ = "images"
    # ids must not be recycled after a delete on SQLite
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    category = Column(
        Enum(*CATEGORIES, name="image_category", native_enum=False, create_constraint=True),
        index=True,
        nullable=False,
    )
    url = Column(String(URL_MAX_LENGTH), nullable=False)
    title = Column(String(TITLE_MAX_LENGTH), nullable=False, default="")
    created_at = Column(UTCDateTime, default=utcnow, index=True, nullable=False)
    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False)
