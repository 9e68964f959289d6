"""
Storage Utility
===============

Image upload to Cloudinary via the cloudinary SDK.
"""

import cloudinary
import cloudinary.exceptions
import cloudinary.uploader
from flask import current_app

RESOURCE_TYPE = 'image'


class ImageHostNotConfigured(RuntimeError):
    """One or more Cloudinary credentials are missing."""


class ImageUploadError(RuntimeError):
    """Cloudinary was unreachable or rejected the upload."""


def get_cloudinary_config():
    """Read Cloudinary credentials from the app config.

    Raises ImageHostNotConfigured if any of them is empty.
    """
    config = {
        'cloud_name': current_app.config.get('CLOUDINARY_CLOUD_NAME'),
        'api_key': current_app.config.get('CLOUDINARY_API_KEY'),
        'api_secret': current_app.config.get('CLOUDINARY_API_SECRET'),
    }
    missing = [name for name, value in config.items() if not value]
    if missing:
        raise ImageHostNotConfigured(
            f"Cloudinary is not configured (missing {', '.join(missing)})."
        )
    config['folder'] = current_app.config.get('CLOUDINARY_FOLDER', 'portfolio-projects')
    return config


def upload_image(file_bytes, filename):
    """Upload image bytes to Cloudinary.

    Args:
        file_bytes: Raw bytes of the uploaded file.
        filename: Original filename, passed along for Cloudinary's metadata.

    Returns:
        The hosted HTTPS URL of the image.
    """
    config = get_cloudinary_config()

    # Credentials go per call so the SDK's global config stays untouched
    try:
        result = cloudinary.uploader.upload(
            file_bytes,
            folder=config['folder'],
            resource_type=RESOURCE_TYPE,
            filename=filename,
            cloud_name=config['cloud_name'],
            api_key=config['api_key'],
            api_secret=config['api_secret'],
        )
    except cloudinary.exceptions.Error as e:
        raise ImageUploadError(f"Cloudinary rejected the upload: {e}") from e

    image_url = (result or {}).get('secure_url')
    if not image_url:
        raise ImageUploadError('Cloudinary response did not include an image URL.')
    return image_url
