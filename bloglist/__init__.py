"""
Blog list service.

A Flask JSON API over a MongoDB collection of blog entries.
"""

from .app import create_app

__all__ = ["create_app"]
