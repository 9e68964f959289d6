"""
Uploads API Module
==================

Provides:
- POST /api/upload-image -- forward one image to Cloudinary, return its URL
"""

from flask import Blueprint

uploads_bp = Blueprint('uploads', __name__, url_prefix='/api')

from . import routes

__all__ = ['uploads_bp']
