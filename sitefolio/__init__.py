"""
Sitefolio - Portfolio Projects API
==================================

A small Flask backend for a portfolio showcase:
- List and add projects stored in Postgres
- Forward project images to Cloudinary
- Restrict callers to an allow-list of origins

Usage:
    from sitefolio import create_app

    app = create_app()
"""

__version__ = '0.1.0'

from .app import create_app

__all__ = ['create_app']
