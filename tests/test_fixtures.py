"""
Shared test fixtures and utilities for the PlanIT test suite.

This module contains the test client, a database session fixture, bearer
token helpers and factories for realistic planning data.
"""

import datetime as dt
from types import SimpleNamespace
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.config import settings
from app.security import create_access_token
from domain.models import SessionLocal
from main import app

# Lifespan is not run without a context manager; conftest creates the tables
client = TestClient(app)

API = settings.api_prefix

# Realistic users
SARAH = 1
MICHAEL = 2

# A Monday, so weekday slots line up with offsets
WEEK_START = dt.date(2024, 5, 6)


def auth_headers(user_id: int) -> dict:
    """Authorization header carrying a fresh token for ``user_id``"""
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """
    Database session bound to the test database.

    Tables are recreated for every test by the autouse fixture in conftest.
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


def make_dinner(dinner_id=1, user_id=SARAH, name="Taco Tuesday", date=None):
    """
    Mock dinner row with the attributes the mappers read.

    Example:
        >>> make_dinner(name="Lasagna", date=WEEK_START).date.weekday()
        0
    """
    return SimpleNamespace(
        id=dinner_id,
        user_id=user_id,
        name=name,
        date=date or WEEK_START + dt.timedelta(days=1),
    )


def register(path: str, user_id: int, payload: dict) -> dict:
    """POST ``payload`` to ``{API}{path}/register`` and return the created body"""
    r = client.post(f"{API}{path}/register", json=payload, headers=auth_headers(user_id))
    assert r.status_code == 201, r.text
    return r.json()
