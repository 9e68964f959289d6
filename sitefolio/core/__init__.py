"""
Sitefolio Core
==============

Configuration, database handle, logging and image storage shared by the
API modules.
"""

from .config import Config
from .database import db, DatabaseNotConfigured
from .logging_service import LoggingService
from .storage import ImageHostNotConfigured, ImageUploadError

__all__ = [
    'Config', 'db', 'DatabaseNotConfigured', 'LoggingService',
    'ImageHostNotConfigured', 'ImageUploadError',
]
