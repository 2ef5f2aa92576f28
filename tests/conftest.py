import pytest
from fastapi.testclient import TestClient

from blogapi.apps.blog import PostStore
from blogapi.core.config import Settings
from blogapi.main import create_app


@pytest.fixture
def store():
    """A store preloaded with the sample posts, fresh for every test."""
    store = PostStore()
    store.seed()
    return store


@pytest.fixture
def empty_store():
    return PostStore()


@pytest.fixture
def settings():
    return Settings(SEED_SAMPLE_POSTS=False)


@pytest.fixture
def client(settings, store):
    with TestClient(create_app(settings=settings, store=store)) as client:
        yield client
