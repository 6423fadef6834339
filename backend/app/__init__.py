"""Expose the application factory at package level.

``from app import create_app`` is what gunicorn, the Flask CLI and the test
suite use.
"""

from __future__ import annotations

from .factory import create_app

__all__ = ["create_app"]
