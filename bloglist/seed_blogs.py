"""
Seed script to populate the canonical sample blogs.

Usage:
    python -m bloglist.seed_blogs           # Add the sample blogs
    python -m bloglist.seed_blogs --clear   # Clear all blogs first, then seed
"""

import argparse
import logging
from typing import List

from .config import AppConfig
from .logger import setup_logging
from .repositories import BlogRepositoryInterface, connect_repository
from .validation import normalize

logger = logging.getLogger(__name__)

INITIAL_BLOGS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
    {
        "title": "Canonical string reduction",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
        "likes": 12,
    },
    {
        "title": "First class tests",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2017/05/05/TestDefinitions.htmll",
        "likes": 10,
    },
    {
        "title": "TDD harms architecture",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2017/03/03/TDD-Harms-Architecture.html",
        "likes": 0,
    },
    {
        "title": "Type wars",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2016/05/01/TypeWars.html",
        "likes": 2,
    },
]


def seed_blogs(repository: BlogRepositoryInterface, clear: bool = False) -> List[str]:
    """
    Seed the collection with the sample blogs.

    Args:
        repository: Target blog store
        clear: If True, delete existing blogs first

    Returns:
        Ids of the inserted blogs
    """
    if clear:
        result = repository.delete_all()
        logger.info(f"Cleared {result.modified_count} existing blogs")

    documents = [normalize(blog).to_document() for blog in INITIAL_BLOGS]
    inserted = repository.insert_many(documents)
    logger.info(f"Inserted {len(inserted)} sample blogs, {repository.count()} total")
    return inserted


def main():
    parser = argparse.ArgumentParser(description="Seed sample blogs")
    parser.add_argument("--clear", action="store_true", help="Clear existing blogs first")
    args = parser.parse_args()

    config = AppConfig.from_env()
    setup_logging(config.log_level, config.log_format)

    client, repository = connect_repository(config.repository)
    try:
        seed_blogs(repository, clear=args.clear)
    finally:
        client.close()


if __name__ == "__main__":
    main()
