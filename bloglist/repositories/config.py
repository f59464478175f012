"""
Repository Configuration and Connection

Loads MongoDB settings from the environment and opens the single
MongoClient the process uses. The client is created once at startup and
closed at shutdown; the repository itself only ever sees a collection.
"""

import os
import logging
from dataclasses import dataclass
from typing import Tuple

from pymongo import MongoClient

from .mongo_repository import MongoBlogRepository

logger = logging.getLogger(__name__)

DEFAULT_MONGODB_URI = "mongodb://localhost:27017/bloglist"


@dataclass
class RepositoryConfig:
    """
    Configuration for repository initialization.

    Loaded from environment variables with sensible defaults.
    """
    mongodb_uri: str = DEFAULT_MONGODB_URI
    database: str = "bloglist"
    collection: str = "blogs"
    server_selection_timeout_ms: int = 5000

    @classmethod
    def from_env(cls) -> "RepositoryConfig":
        """
        Load configuration from environment variables.

        Environment variables:
        - MONGODB_URI: MongoDB connection string
        - TEST_MONGODB_URI: Used instead of MONGODB_URI when FLASK_ENV=testing
        - MONGODB_DATABASE: Database name (default: bloglist)
        - MONGODB_COLLECTION: Collection name (default: blogs)
        """
        uri = os.getenv("MONGODB_URI", DEFAULT_MONGODB_URI)
        if os.getenv("FLASK_ENV") == "testing" and os.getenv("TEST_MONGODB_URI"):
            uri = os.getenv("TEST_MONGODB_URI")

        return cls(
            mongodb_uri=uri,
            database=os.getenv("MONGODB_DATABASE", "bloglist"),
            collection=os.getenv("MONGODB_COLLECTION", "blogs"),
        )


def connect_repository(config: RepositoryConfig) -> Tuple[MongoClient, MongoBlogRepository]:
    """
    Open the MongoDB client and build the blog repository.

    The caller owns the returned client and must close it at shutdown.
    """
    client = MongoClient(
        config.mongodb_uri,
        serverSelectionTimeoutMS=config.server_selection_timeout_ms,
    )
    collection = client[config.database][config.collection]
    logger.info(f"Blog repository connected: {config.database}.{config.collection}")
    return client, MongoBlogRepository(collection)
