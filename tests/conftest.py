"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and points
the application at an in-memory SQLite database before anything imports it.
"""

import os
import sys
from pathlib import Path

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"
os.environ["JWT_SECRET_KEY"] = "planit-test-secret-key-0123456789abcdef"

import pytest

from domain.models import Base, engine


@pytest.fixture(autouse=True)
def reset_database():
    """Give every test empty tables"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
