"""
jsv/api/routers package marker.
"""

from jsv.api.routers.csv_validation import router as csv_validation_router

__all__ = [
    "csv_validation_router",
]
