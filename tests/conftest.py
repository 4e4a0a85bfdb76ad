"""Common test fixtures and utilities."""

import pytest
from typing import Generator
from fastapi.testclient import TestClient

from src.babymusic.catalog import CatalogService
from src.babymusic.store import PlaylistStore
from src.babymusic.webapi import app, get_catalog


@pytest.fixture
def database_url(tmp_path) -> str:
    """SQLite database file private to one test."""
    return f"sqlite:///{tmp_path / 'music_urls.db'}"


@pytest.fixture
def store(database_url) -> Generator[PlaylistStore, None, None]:
    """Create an empty playlist store.

    Yields:
        PlaylistStore: Store backed by a fresh SQLite file
    """
    store = PlaylistStore(database_url)
    yield store
    store.close()


@pytest.fixture
def catalog(store) -> CatalogService:
    """Catalog over an empty store."""
    return CatalogService(store)


@pytest.fixture
def seeded_catalog(catalog) -> CatalogService:
    """Catalog whose store holds the default videos."""
    catalog.bootstrap()
    return catalog


@pytest.fixture
def client(seeded_catalog) -> Generator[TestClient, None, None]:
    """Create a test client wired to the seeded catalog.

    Yields:
        TestClient: Client for the web API
    """
    app.dependency_overrides[get_catalog] = lambda: seeded_catalog
    yield TestClient(app)
    app.dependency_overrides.clear()
