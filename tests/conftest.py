"""
Shared fixtures: an in-memory MongoStore backed by mongomock and a fast hasher.
"""

import mongomock
import pytest

from resumehub.app import create_app
from resumehub.db import MongoStore
from resumehub.services.password_service import PasswordHasher


@pytest.fixture
def store():
    store = MongoStore(mongomock.MongoClient(), "resumehub_test")
    store.ensure_indexes()
    yield store
    store.close()


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def app(store, hasher):
    return create_app(store, hasher=hasher, config={"TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def clock(monkeypatch):
    """Deterministic, strictly increasing timestamps for the resume service."""
    from datetime import datetime, timedelta
    from resumehub.services import resume_service

    state = {"now": datetime(2024, 1, 1, 12, 0, 0)}

    def tick():
        state["now"] = state["now"] + timedelta(minutes=1)
        return state["now"]

    monkeypatch.setattr(resume_service, "utcnow", tick)
    return state
