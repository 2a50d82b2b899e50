import os

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from dispatch.api import deps
from dispatch.db.base import Base
from dispatch.schemas.trip import TripCreate
from dispatch.services import trip_lifecycle
from main import app


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[deps.get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def driver_payload():
    return {
        "name": "Ravi Kumar",
        "email": "ravi@example.com",
        "phoneNumber": "9876543210",
        "password": "s3cret-pass",
        "rcNumber": "TN01AB1234",
        "fcDate": "2026-03-31",
        "insuranceNumber": "INS-5521",
        "insuranceExpiryDate": "2026-12-31",
        "drivingLicense": "DL-0420110012345",
        "drivingLicenseExpiryDate": "2030-01-15",
    }


@pytest.fixture
def trip_payload():
    return {
        "pickupLocation": "Chennai Central",
        "dropLocation": "Pondicherry",
        "tripType": "one-way",
        "car": "sedan",
        "pickupDate": "2026-10-20",
        "pickupTime": "06:30",
        "kmPrice": 14,
        "km": 150,
        "betta": 400,
        "phone": "9000000001",
        "state": "TN",
        "customerName": "Meena",
        "customerRemark": "Two suitcases",
        "adult": 2,
        "child": 1,
    }


@pytest.fixture
def make_trip(db_session, trip_payload):
    """Create a trip directly through the lifecycle service."""
    def _make(**overrides):
        data = dict(trip_payload, **overrides)
        return trip_lifecycle.create_trip(db_session, TripCreate(**data))
    return _make
