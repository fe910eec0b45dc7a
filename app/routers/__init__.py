"""
API Routers
Separate router modules for each domain.
"""

from app.routers import layout

__all__ = ["layout"]
