"""Shared configuration for the test suite.

The application reads its settings when its modules are first imported, so
the environment is prepared here before any test module imports them.
"""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "activity_api_tests.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["SITE_URL"] = "http://example.test"
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture()
def database():
    """Provide a freshly created schema and drop it afterwards."""

    from activity_api.infrastructure import models  # noqa: F401
    from activity_api.infrastructure.database import Base, engine, initialize_database

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session(database):
    from activity_api.infrastructure.database import SessionLocal

    with SessionLocal() as db_session:
        yield db_session
