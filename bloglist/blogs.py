"""
Blogs API Blueprint.

JSON endpoints for the blogs collection. The blueprint is mounted at
/blogs and again at /api/blogs for the front-end.

Errors are raised, not returned: the handlers registered in app.py turn
BlogListError and PyMongoError into JSON responses.
"""

from flask import Blueprint, current_app, jsonify, request

from .handlers import BlogResourceHandler

blogs_bp = Blueprint("blogs", __name__)


def _get_handler() -> BlogResourceHandler:
    """Handler injected by create_app()."""
    return current_app.extensions["blog_handler"]


@blogs_bp.route("", methods=["GET"])
def list_blogs():
    """
    List every blog.

    Returns:
        JSON array of blog entries
    """
    blogs = _get_handler().list()
    return jsonify([b.to_json() for b in blogs])


@blogs_bp.route("/<blog_id>", methods=["GET"])
def get_blog(blog_id: str):
    return jsonify(_get_handler().get(blog_id).to_json())


@blogs_bp.route("", methods=["POST"])
def create_blog():
    """
    Create a blog.

    Request Body:
        title, author, url (required), likes (optional, default 0)

    Returns:
        201 with the created entry, 400 on validation failure
    """
    data = request.get_json(silent=True)
    entry = _get_handler().create(data if data is not None else {})
    return jsonify(entry.to_json()), 201


@blogs_bp.route("/<blog_id>", methods=["PUT"])
def update_blog(blog_id: str):
    """
    Replace every field of a blog.

    Returns:
        200 with the updated entry, 400 on malformed id or invalid body,
        404 if no blog has that id
    """
    data = request.get_json(silent=True)
    entry = _get_handler().update(blog_id, data if data is not None else {})
    return jsonify(entry.to_json())


@blogs_bp.route("/<blog_id>", methods=["DELETE"])
def delete_blog(blog_id: str):
    """Delete a blog. 204 whether or not it existed."""
    _get_handler().delete(blog_id)
    return "", 204
