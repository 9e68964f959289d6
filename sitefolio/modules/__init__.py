"""
Sitefolio Modules
=================

Flask blueprints exposing the public API.
"""

__all__ = ['projects', 'uploads']
