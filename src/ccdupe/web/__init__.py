"""HTTP API for ccdupe (FastAPI). Thin adapters over the scan pipeline and FileService."""
from .app import create_app

__all__ = ["create_app"]
