"""
Shared fixtures for the Sitefolio test suite.
Run with: pytest -v

NOTE: pytest and pytest-flask are listed under extras_require["dev"] in setup.py.
Install with: pip install -e ".[dev]"
"""

import os
import shutil
import tempfile

import pytest

from sitefolio import create_app

ALLOWED_ORIGINS = [
    'https://my-favorite-sites.netlify.app',
    'http://localhost:3000',
    'http://localhost:5173',
]


def make_config(db_dir=None, **overrides):
    """Settings object for create_app(), independent of the environment."""
    settings = {
        'TESTING': True,
        'DATABASE_URL': f"sqlite:///{os.path.join(db_dir, 'projects.db')}" if db_dir else None,
        'DB_AUTO_CREATE': True,
        'CORS_ORIGINS': list(ALLOWED_ORIGINS),
        'CLOUDINARY_CLOUD_NAME': 'demo',
        'CLOUDINARY_API_KEY': '123456789012345',
        'CLOUDINARY_API_SECRET': 'test-secret',
        'CLOUDINARY_FOLDER': 'portfolio-projects',
        'IMAGE_MAX_BYTES': 5 * 1024 * 1024,
        'LOG_LEVEL': 'INFO',
    }
    settings.update(overrides)
    return type('TestConfig', (), settings)


@pytest.fixture
def tmp_db_dir():
    """Create a temporary directory for the test database, cleaned up after."""
    d = tempfile.mkdtemp(prefix="sitefolio-test-")
    yield d
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def app(tmp_db_dir):
    """App bound to a fresh SQLite database with Cloudinary credentials set."""
    return create_app(make_config(tmp_db_dir))


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def sample_project():
    return {
        'title': 'Weather Board',
        'description': 'A tiny forecast dashboard.',
        'link_url': 'https://weather.example.com',
        'image_url': 'https://img/x.png',
    }


@pytest.fixture
def app_factory(tmp_db_dir):
    """Build an app with selected settings overridden."""
    def _build(**overrides):
        return create_app(make_config(tmp_db_dir, **overrides))
    return _build
