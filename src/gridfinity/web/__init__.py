"""FastAPI REST API for drawer baseplate planning.

This module provides a REST API for calculating Gridfinity baseplate
layouts and listing printer presets.

Usage:
    uvicorn gridfinity.web:app --reload
"""

from gridfinity.web.app import app, create_app

__all__ = ["app", "create_app"]
