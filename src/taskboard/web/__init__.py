"""Item CRUD web service."""

from .items_app import create_app, serve

__all__ = ["create_app", "serve"]
