from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from config import get_settings

from ..exceptions import RecordNotFoundError
from ..models import UserRecord
from .models import Base, User

settings = get_settings()

engine = create_engine(settings.database_url, echo=settings.log_level == "DEBUG", pool_pre_ping=True)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_engine() -> Engine:
    """Get the database engine."""
    return engine


def init_db(bind: Engine | None = None) -> None:
    """Initialize database tables."""
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables initialized")


@contextmanager
def session_scope(factory: sessionmaker | None = None) -> Generator[Session, None, None]:
    """Provide a transactional scope around a series of operations."""
    session = (factory or SessionLocal)()
    try:
        yield session
        session.commit()
    except Exception:  # Intentionally broad - rollback on any error before re-raising
        session.rollback()
        raise
    finally:
        session.close()


class SqlRecordStore:
    """Record store backed by the ``user`` table."""

    def __init__(self, session_factory: sessionmaker | None = None):
        self.session_factory = session_factory or SessionLocal

    def get_user(self, user_id: int) -> UserRecord:
        with session_scope(self.session_factory) as session:
            user = session.get(User, user_id)
            if user is None:
                raise RecordNotFoundError("user", {"id": user_id})
            return user.to_record()
