"""
Global fixtures for all unit tests.

Provides an autouse fixture that prevents real MongoDB connection
attempts (a MongoClient pointed at nothing waits out the server
selection timeout) and isolates the environment.
"""

import pytest
from unittest.mock import patch, MagicMock


@pytest.fixture(autouse=True)
def mock_mongodb():
    """Patch MongoClient where the repository config opens it."""
    with patch("bloglist.repositories.config.MongoClient") as mock_client:
        mock_instance = MagicMock()
        mock_db = MagicMock()
        mock_collection = MagicMock()

        # Setup chain: client["db"]["collection"]
        mock_instance.__getitem__ = MagicMock(return_value=mock_db)
        mock_db.__getitem__ = MagicMock(return_value=mock_collection)

        mock_client.return_value = mock_instance
        yield mock_client


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Drop connection settings a developer's shell or .env may carry."""
    for name in ("MONGODB_URI", "TEST_MONGODB_URI", "MONGODB_DATABASE", "MONGODB_COLLECTION", "PORT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("FLASK_ENV", "testing")
