import threading
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

# Process-local in-memory database; every restart begins from the seed records.
SQLALCHEMY_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

# Largest value an SQLite INTEGER column can hold
SQLITE_INT_MAX = 2**63 - 1

# All sessions share one SQLite connection, so store work is serialized.
store_lock = threading.RLock()


class Base(DeclarativeBase):
    pass


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        with store_lock:
            db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """
    Run a unit of store work under the store lock.
    Commits on success and rolls back if anything inside raises.
    """
    with store_lock:
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
