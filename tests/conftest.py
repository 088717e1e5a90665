"""Shared fixtures: settings, a SQLite images table and a fake connection factory."""

import logging
from datetime import datetime, timedelta
from unittest.mock import Mock

import pytest
from sqlalchemy import create_engine, insert

from imagefn.config import Settings
from imagefn.database.models import Base, Image

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put back the root logger's handlers and level that setup_logging() replaces."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


def _make_rows(count, **overrides):
    """Build image rows one minute apart, oldest first."""
    rows = []
    for i in range(count):
        row = {
            "id": f"img-{i:02d}",
            "imagename": f"image {i}",
            "detail": f"detail {i}",
            "imageurl": f"https://objectstorage.example.com/n/ns/b/images/o/img-{i:02d}.png",
            "username": "alice",
            "create_date": BASE_TIME + timedelta(minutes=i),
            "deleted": 0,
        }
        row.update(overrides)
        rows.append(row)
    return rows


@pytest.fixture
def settings():
    """Settings with all three credentials present."""
    return Settings(
        _env_file=None,
        oracle_username="scott",
        oracle_password="tiger",
        oracle_servicename="orclpdb",
        log_format="text",
    )


@pytest.fixture
def database_url(tmp_path):
    """URL of an empty SQLite database file."""
    return f"sqlite:///{tmp_path / 'images.db'}"


@pytest.fixture
def seed_images(database_url):
    """Create the images table and return a function inserting rows into it."""
    engine = create_engine(database_url)
    Base.metadata.create_all(engine)

    def _seed(rows):
        if rows:
            with engine.begin() as conn:
                conn.execute(insert(Image.__table__), rows)

    yield _seed
    engine.dispose()


@pytest.fixture
def connection_factory(database_url):
    """Connection factory returning engines bound to the SQLite database."""
    return Mock(side_effect=lambda descriptor: create_engine(database_url))


@pytest.fixture
def make_rows():
    """Factory for image rows one minute apart, oldest first."""
    return _make_rows
