import os
from datetime import timedelta
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

# Test environment
os.environ["TESTING"] = "1"
os.environ["DATABASE_URL"] = "sqlite://"

from app import app
from database import SessionLocal
from models import Base, UserDB
from scheduling import default_window

client = TestClient(app)

WINDOW = {"window_start": "2024-10-23T09:00:00", "window_end": "2024-10-23T21:00:00"}

# ---------------------------------------------------------
# DB Setup Fixture
# ---------------------------------------------------------
@pytest.fixture(autouse=True)
def setup_db():
    db = SessionLocal()
    Base.metadata.drop_all(bind=db.bind)
    Base.metadata.create_all(bind=db.bind)
    yield
    db.close()

# ---------------------------------------------------------
# Helpers
# ---------------------------------------------------------
def create_test_user(db: Session, username, timezone="UTC"):
    user = UserDB(username=username, password="pw", timezone=timezone)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user

def add_events(user_id, *ranges):
    for start, end in ranges:
        response = client.post("/add-event", json={
            "user_id": user_id,
            "title": "busy",
            "start_time": f"2024-10-23T{start}:00",
            "end_time": f"2024-10-23T{end}:00"
        })
        assert response.status_code == 201

def find(user_id, friend_id, duration, **window):
    return client.post("/optimal-time", json={"user_id": user_id, "friend_id": friend_id, "duration": duration, **window})

# =========================================================
# TEST: POST /optimal-time
# =========================================================
def test_friend_without_events_gets_fallback():
    db = SessionLocal()
    alice = create_test_user(db, "alice")
    bob = create_test_user(db, "bob", timezone="Asia/Kolkata")
    add_events(alice.id, ("10:00", "11:00"))

    response = find(alice.id, bob.id, 60, **WINDOW)
    assert response.status_code == 200

    data = response.json()
    assert data["friend_timezone"] == "Asia/Kolkata"
    assert data["proposals"] == [{"start": "2024-10-23T09:00:00", "end": "2024-10-23T10:00:00"}]

def test_shared_free_slots():
    db = SessionLocal()
    alice = create_test_user(db, "alice")
    bob = create_test_user(db, "bob")
    add_events(alice.id, ("10:00", "11:00"), ("13:00", "14:00"))
    add_events(bob.id, ("10:00", "11:00"))

    response = find(alice.id, bob.id, 60, **WINDOW)
    assert response.status_code == 200
    # alice: 09-10, 11-12, 14-15; bob: 09-10, 11-12
    assert response.json()["proposals"] == [
        {"start": "2024-10-23T09:00:00", "end": "2024-10-23T10:00:00"},
        {"start": "2024-10-23T11:00:00", "end": "2024-10-23T12:00:00"},
    ]

def test_offset_schedules_fall_back():
    db = SessionLocal()
    alice = create_test_user(db, "alice")
    bob = create_test_user(db, "bob")
    add_events(alice.id, ("09:00", "10:00"))
    add_events(bob.id, ("09:30", "10:30"))

    response = find(alice.id, bob.id, 30, **WINDOW)
    assert response.status_code == 200
    assert response.json()["proposals"] == [{"start": "2024-10-23T09:00:00", "end": "2024-10-23T09:30:00"}]

def test_default_window_when_none_given():
    db = SessionLocal()
    alice = create_test_user(db, "alice")
    bob = create_test_user(db, "bob")

    response = find(alice.id, bob.id, 45)
    assert response.status_code == 200

    proposals = response.json()["proposals"]
    window = default_window()
    assert len(proposals) == 1
    assert proposals[0]["start"] == window.start.isoformat()
    assert proposals[0]["end"] == (window.start + timedelta(minutes=45)).isoformat()

@pytest.mark.parametrize("duration", [0, -15])
def test_non_positive_duration(duration):
    db = SessionLocal()
    alice = create_test_user(db, "alice")
    bob = create_test_user(db, "bob")

    response = find(alice.id, bob.id, duration, **WINDOW)
    assert response.status_code == 422

def test_duration_above_maximum_is_rejected():
    db = SessionLocal()
    alice = create_test_user(db, "alice")
    bob = create_test_user(db, "bob")

    response = find(alice.id, bob.id, 10**10, **WINDOW)
    assert response.status_code == 422

def test_day_long_duration_falls_back():
    db = SessionLocal()
    alice = create_test_user(db, "alice")
    bob = create_test_user(db, "bob")

    response = find(alice.id, bob.id, 24 * 60, **WINDOW)
    assert response.status_code == 200
    assert response.json()["proposals"] == [{"start": "2024-10-23T09:00:00", "end": "2024-10-24T09:00:00"}]

def test_window_at_end_of_calendar_is_rejected():
    db = SessionLocal()
    alice = create_test_user(db, "alice")
    bob = create_test_user(db, "bob")

    response = find(alice.id, bob.id, 60, window_start="9999-12-31T23:00:00", window_end="9999-12-31T23:30:00")
    assert response.status_code == 400
    assert response.json()["detail"] == "Call does not fit into the supported date range"

def test_unknown_friend():
    db = SessionLocal()
    alice = create_test_user(db, "alice")

    response = find(alice.id, 999, 30, **WINDOW)
    assert response.status_code == 404

def test_half_open_window_is_rejected():
    db = SessionLocal()
    alice = create_test_user(db, "alice")
    bob = create_test_user(db, "bob")

    response = find(alice.id, bob.id, 30, window_start="2024-10-23T09:00:00")
    assert response.status_code == 422
