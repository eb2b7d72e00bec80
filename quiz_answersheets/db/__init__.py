# SQLAlchemy-backed record store
from .database import SessionLocal, SqlRecordStore, get_engine, init_db, session_scope
from .models import Base, User

__all__ = [
    "Base",
    "SessionLocal",
    "SqlRecordStore",
    "User",
    "get_engine",
    "init_db",
    "session_scope",
]
