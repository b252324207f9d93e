# server/database.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.config import DATABASE_URL, DB_POOL_SIZE
from models import Base
from models import user, image  # noqa: F401  (register tables on Base.metadata)


def build_engine(url: str):
    """
    Creates an engine for the given URL.
    SQLite gets a thread-shareable connection (routes run in a thread pool);
    in-memory SQLite shares a single connection so every session sees the same data.
    Other backends use a bounded connection pool.
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)

    return create_engine(
        url,
        pool_size=DB_POOL_SIZE,
        max_overflow=0,
        pool_pre_ping=True,
    )


engine = build_engine(DATABASE_URL)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def init_db(bind=None):
    Base.metadata.create_all(bind=bind or engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
