import os
import sys
from pathlib import Path

import pytest

APP_ROOT = Path(__file__).resolve().parents[1] / "app"
if str(APP_ROOT) not in sys.path:
    sys.path.insert(0, str(APP_ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import database  # noqa: F401  installs the SQLite foreign-key listener
from utils import migrator


@pytest.fixture()
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'cinema.db'}"


@pytest.fixture()
def migrated_url(db_url):
    migrator.upgrade(database_url=db_url)
    return db_url


@pytest.fixture()
def engine(migrated_url):
    engine = create_engine(migrated_url)
    yield engine
    engine.dispose()


@pytest.fixture()
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
