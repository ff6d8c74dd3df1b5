"""HTTP API for scanning source code."""

from todo_mapper.api.app import create_app

__all__ = ["create_app"]
