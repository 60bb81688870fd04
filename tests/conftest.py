import os
import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Settings are read at import time, so the environment comes first
os.environ["TESTING"] = "1"
os.environ["TEST_DATABASE_URL"] = "sqlite:///./test.db"
os.environ.setdefault("JWT_SECRET", "test-signing-secret")

from fastapi.testclient import TestClient
from unittest.mock import MagicMock

from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker

from doctor_desk.main import app
from doctor_desk.core.database import Base, get_db, init_db
from doctor_desk.core.security import get_password_hash
from doctor_desk.models.appointment import Appointment
from doctor_desk.models.doctor import Doctor
from doctor_desk.models.patient import Patient

# Create test database
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def override_get_db():
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()

app.dependency_overrides[get_db] = override_get_db

DOCTOR_PASSWORD = "div1"

@pytest.fixture(scope="function")
def test_db():
    # Create tables
    init_db(engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def client():
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client

@pytest.fixture
def db_session(test_db):
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture
def doctor(db_session):
    """A stored doctor whose plain password is DOCTOR_PASSWORD."""
    record = Doctor(
        name="Dr. Div Raj",
        email="dr.div@example.com",
        password=get_password_hash(DOCTOR_PASSWORD),
        specialization="Cardiology",
        phone="9876543210",
    )
    db_session.add(record)
    db_session.commit()
    db_session.refresh(record)
    return record

@pytest.fixture
def make_appointment(db_session):
    """Insert an appointment directly, bypassing the booking route."""
    def _make(date_time: datetime, doctor_id: str = "d" * 24, **fields):
        record = Appointment(
            doctor_id=doctor_id,
            patient_name=fields.pop("patient_name", "Alice"),
            date_time=date_time,
            **fields
        )
        db_session.add(record)
        db_session.commit()
        db_session.refresh(record)
        return record
    return _make

@pytest.fixture
def make_patient(db_session):
    def _make(**fields):
        record = Patient(**fields)
        db_session.add(record)
        db_session.commit()
        db_session.refresh(record)
        return record
    return _make

@pytest.fixture
def broken_db():
    """Route every request to a session whose database calls all fail."""
    failure = OperationalError("SELECT 1", {}, Exception("database unavailable"))
    session = MagicMock()
    session.query.side_effect = failure
    session.get.side_effect = failure
    session.commit.side_effect = failure

    app.dependency_overrides[get_db] = lambda: session
    yield session
    app.dependency_overrides[get_db] = override_get_db
