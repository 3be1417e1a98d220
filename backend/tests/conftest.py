import os
import tempfile
from pathlib import Path

import pytest

# Point the app at a throwaway SQLite file before `career_explorer` is imported.
_TMP_DIR = tempfile.mkdtemp(prefix="career_explorer_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_TMP_DIR) / 'test.db'}"
os.environ["ENV"] = "dev"
os.environ["SEED_ON_STARTUP"] = "false"

from sqlmodel import Session  # noqa: E402

from career_explorer.database import create_db_and_tables, drop_db_and_tables, engine  # noqa: E402


@pytest.fixture(autouse=True)
def reset_db():
    """Give every test empty tables."""
    drop_db_and_tables()
    create_db_and_tables()
    yield


@pytest.fixture
def session():
    with Session(engine) as s:
        yield s
