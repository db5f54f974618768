import os

# Keep the application engine off the working directory
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SHARE_SECRET", "test-share-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.dependencies.current_caregiver import get_share_client
from app.models.activity_log_model import ActivityLog
from app.models.caregiver_model import Caregiver
from app.services.cloud_share_client import ACCOUNT_AVAILABLE
from config.database import Base, get_db, init_db
from main import app


class FakeShareClient:
    """Stands in for the share server."""

    def __init__(self):
        self.status = ACCOUNT_AVAILABLE
        self.push_error = None
        self.revoke_error = None
        self.status_error = None
        self.pushed = []
        self.revoked = []

    def account_status(self):
        if self.status_error:
            raise self.status_error
        return self.status

    def push_share(self, share):
        if self.push_error:
            raise self.push_error
        self.pushed.append(share.id)
        return f"https://share.example.com/s/{share.id}"

    def revoke_share(self, share_id):
        if self.revoke_error:
            raise self.revoke_error
        self.revoked.append(share_id)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def share_client():
    return FakeShareClient()


@pytest.fixture
def client(engine, share_client):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_share_client] = lambda: share_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def current_caregiver(client):
    response = client.post("/api/setup", json={"name": "Mina"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def make_log(db):
    """Inserts a log entry directly, creating its caregiver when needed."""

    def _make_log(activity_type, start_time, caregiver=None, **fields):
        if caregiver is None:
            caregiver = db.query(Caregiver).first()
            if caregiver is None:
                caregiver = Caregiver(name="Mina", is_current_user=True)
                db.add(caregiver)
                db.flush()
        log = ActivityLog(
            caregiver_id=caregiver.id,
            activity_type=activity_type,
            start_time=start_time,
            left_duration=fields.get("left_duration", 0),
            right_duration=fields.get("right_duration", 0),
            volume_ml=fields.get("volume_ml", 0),
            notes=fields.get("notes"),
        )
        db.add(log)
        db.commit()
        db.refresh(log)
        return log

    return _make_log
