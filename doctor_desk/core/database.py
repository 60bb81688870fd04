from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from typing import Generator
import secrets
from .config import settings


def build_engine(database_url: str):
    """Create the process-wide engine for the given URL."""
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url, connect_args={"check_same_thread": False}
        )
    return create_engine(
        database_url,
        pool_size=5,
        max_overflow=10,
        pool_timeout=30,
        pool_recycle=1800,  # Recycle connections after 30 minutes
        pool_pre_ping=True,
    )


engine = build_engine(settings.get_database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def generate_id() -> str:
    """24 hex characters, the width of a document-store object id."""
    return secrets.token_hex(12)


# Database dependency
def get_db() -> Generator[Session, None, None]:
    """Get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# Database initialization
def init_db(bind=None):
    """Initialize database tables."""
    from ..models import appointment, doctor, patient  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
