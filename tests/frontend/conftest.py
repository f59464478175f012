"""
Pytest fixtures for the HTML view tests.
"""

import pytest


@pytest.fixture
def togglable():
    from bloglist.togglable import Togglable
    return Togglable("new blog")
