"""FastAPI routers acting as controllers in the MVC architecture."""

from . import wishes

__all__ = ["wishes"]
