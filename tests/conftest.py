"""
Shared fixtures for the blog list tests.

The app under test gets a MongoBlogRepository over a mongomock
collection, so the HTTP tests exercise the real repository code without
a MongoDB server. The collection is reset to the sample blogs before
every test.
"""

import os

import mongomock
import pytest

# Set test environment BEFORE any imports so AppConfig never reads real values
os.environ["FLASK_ENV"] = "testing"

from bloglist import create_app
from bloglist.config import AppConfig
from bloglist.repositories import MongoBlogRepository, RepositoryConfig
from bloglist.seed_blogs import INITIAL_BLOGS


@pytest.fixture
def initial_blogs():
    """The canonical sample blogs (copies, safe to mutate)."""
    return [dict(blog) for blog in INITIAL_BLOGS]


@pytest.fixture
def new_blog_entry():
    return {
        "title": "Things I Don't Know as of 2018",
        "author": "Dan Abramov",
        "url": "https://overreacted.io/things-i-dont-know-as-of-2018/",
        "likes": 3,
    }


@pytest.fixture
def new_blog_entry_without_likes(new_blog_entry):
    entry = dict(new_blog_entry, title="Writing Resilient Components")
    del entry["likes"]
    return entry


@pytest.fixture
def blog_collection(initial_blogs):
    """mongomock collection seeded with the sample blogs."""
    client = mongomock.MongoClient()
    collection = client["bloglist_test"]["blogs"]
    collection.delete_many({})
    collection.insert_many(initial_blogs)
    yield collection
    client.close()


@pytest.fixture
def repository(blog_collection):
    return MongoBlogRepository(blog_collection)


@pytest.fixture
def app_config():
    return AppConfig(
        env="testing",
        repository=RepositoryConfig(mongodb_uri="mongodb://localhost:27017/bloglist_test"),
    )


@pytest.fixture
def app(repository, app_config):
    """Flask app fixture with test configuration."""
    return create_app(repository, app_config)


@pytest.fixture
def client(app):
    """Flask test client."""
    with app.test_client() as client:
        yield client


@pytest.fixture
def blogs_in_db(blog_collection):
    """Callable returning the raw documents currently stored."""
    def _blogs_in_db():
        return list(blog_collection.find({}))
    return _blogs_in_db
