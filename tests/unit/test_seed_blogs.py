"""
Tests for the seeding script.
"""

from unittest.mock import MagicMock

from bloglist.repositories import BlogRepositoryInterface, WriteResult
from bloglist.seed_blogs import INITIAL_BLOGS, seed_blogs


def _mock_repo():
    repo = MagicMock(spec=BlogRepositoryInterface)
    repo.insert_many.side_effect = lambda docs: [str(i) for i in range(len(docs))]
    repo.delete_all.return_value = WriteResult(matched_count=3, modified_count=3)
    repo.count.return_value = len(INITIAL_BLOGS)
    return repo


def test_seed_inserts_sample_blogs():
    repo = _mock_repo()

    inserted = seed_blogs(repo)

    assert len(inserted) == len(INITIAL_BLOGS)
    repo.delete_all.assert_not_called()
    documents = repo.insert_many.call_args[0][0]
    assert {"title", "author", "url", "likes"} == set(documents[0])


def test_seed_with_clear_deletes_first():
    repo = _mock_repo()

    seed_blogs(repo, clear=True)

    repo.delete_all.assert_called_once_with()


def test_sample_blogs_include_canonical_string_reduction():
    blog = next(b for b in INITIAL_BLOGS if b["title"] == "Canonical string reduction")

    assert blog["author"] == "Edsger W. Dijkstra"
    assert blog["likes"] == 12
