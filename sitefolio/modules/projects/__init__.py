"""
Projects API Module
===================

Public JSON API for the portfolio showcase.

Provides:
- GET /api/projects -- every project, newest first
- POST /api/projects -- add a project (image_url comes from /api/upload-image)
"""

from flask import Blueprint

projects_bp = Blueprint('projects', __name__, url_prefix='/api')

from . import routes

__all__ = ['projects_bp']
