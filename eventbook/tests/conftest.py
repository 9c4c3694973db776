import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from eventbook.database.db import SessionLocal
from eventbook.database.seed import init_db
from eventbook.main import app


@pytest.fixture(autouse=True)
def reset_store():
    """Every test starts from the seed event and seed booking."""
    init_db()
    yield


@pytest.fixture
def db_session():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
