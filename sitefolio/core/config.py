import os
from dotenv import load_dotenv

load_dotenv()


def _database_url():
    url = os.getenv('DATABASE_URL')
    # Heroku/Render style URLs are rejected by SQLAlchemy
    if url and url.startswith('postgres://'):
        url = 'postgresql://' + url[len('postgres://'):]
    return url


def _cors_origins(site_origin):
    raw = os.getenv('CORS_ORIGINS')
    if raw:
        return [origin.strip().rstrip('/') for origin in raw.split(',') if origin.strip()]
    return [site_origin, 'http://localhost:3000', 'http://localhost:5173']


class Config:
    """
    Base configuration for Sitefolio.
    Built once at process start and handed to create_app().
    """
    # Database (Neon / any managed Postgres)
    DATABASE_URL = _database_url()
    DB_AUTO_CREATE = os.getenv('DB_AUTO_CREATE', '1').lower() not in ('0', 'false', 'no')

    # CORS - the deployed portfolio plus local dev servers (CRA and Vite)
    SITE_ORIGIN = os.getenv('SITE_ORIGIN', 'https://my-favorite-sites.netlify.app').rstrip('/')
    CORS_ORIGINS = _cors_origins(SITE_ORIGIN)

    # Cloudinary image hosting
    CLOUDINARY_CLOUD_NAME = os.getenv('CLOUDINARY_CLOUD_NAME')
    CLOUDINARY_API_KEY = os.getenv('CLOUDINARY_API_KEY')
    CLOUDINARY_API_SECRET = os.getenv('CLOUDINARY_API_SECRET')
    CLOUDINARY_FOLDER = os.getenv('CLOUDINARY_FOLDER', 'portfolio-projects')
    IMAGE_MAX_BYTES = int(os.getenv('IMAGE_MAX_BYTES', str(5 * 1024 * 1024)))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Port for local server (Render injects PORT)
    PORT = int(os.getenv('PORT', '3000'))
