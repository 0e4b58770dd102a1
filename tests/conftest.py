import itertools
from datetime import datetime, timedelta, timezone

import pytest

from tagjournal.config import Config
from tagjournal.index import TagIndex
from tagjournal.store import LogStore
from tagjournal.web import create_app


def ticking_clock(start, step=timedelta(minutes=1)):
    """time_func that advances by *step* on every call."""
    counter = itertools.count()
    return lambda: start + step * next(counter)


@pytest.fixture
def log_dir(tmp_path):
    path = tmp_path / "logs"
    path.mkdir()
    return path


@pytest.fixture
def store(log_dir):
    return LogStore(str(log_dir), time_func=ticking_clock(datetime(2024, 3, 5, 8, 0, tzinfo=timezone.utc)))


@pytest.fixture
def index():
    return TagIndex()


@pytest.fixture
def app(store, index):
    application = create_app(store, index, Config(log_dir=store.log_dir))
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    return app.test_client()
