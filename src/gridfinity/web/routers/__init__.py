"""API routers for the REST API."""

from gridfinity.web.routers.calculate import router as calculate_router
from gridfinity.web.routers.printers import router as printers_router

__all__ = [
    "calculate_router",
    "printers_router",
]
