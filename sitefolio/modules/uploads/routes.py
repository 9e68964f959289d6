"""
Uploads Routes
==============

- POST /api/upload-image: multipart form with one file under "imageFile".
  Answers {"imageUrl": ...} with the Cloudinary URL. Nothing is written to
  the projects table; the caller posts the project separately.
"""

from flask import request, jsonify, current_app
from . import uploads_bp
from sitefolio.core.logging_service import LoggingService
from sitefolio.core.storage import (
    ImageHostNotConfigured,
    get_cloudinary_config,
    upload_image as upload_to_cloudinary,
)

FILE_FIELD = 'imageFile'
DEFAULT_MAX_BYTES = 5 * 1024 * 1024


def format_size(num_bytes):
    """Human-readable size: 5242880 -> '5 MB', 16 -> '16 bytes'"""
    for unit, factor in (('MB', 1024 * 1024), ('KB', 1024)):
        if num_bytes >= factor:
            return f"{num_bytes / factor:g} {unit}"
    return f"{num_bytes} bytes"


@uploads_bp.route('/upload-image', methods=['POST'])
def upload_image():
    """Upload an image to Cloudinary and return its public URL"""
    if FILE_FIELD not in request.files:
        return jsonify({'error': 'No image file provided.'}), 400

    file = request.files[FILE_FIELD]
    if file.filename == '':
        return jsonify({'error': 'No file selected.'}), 400

    try:
        get_cloudinary_config()
    except ImageHostNotConfigured as e:
        LoggingService.error('uploads', 'Cloudinary credentials missing', str(e))
        return jsonify({
            'error': 'Image hosting is not configured on the server.',
            'details': str(e)
        }), 500

    file_bytes = file.read()
    max_bytes = current_app.config.get('IMAGE_MAX_BYTES', DEFAULT_MAX_BYTES)
    if len(file_bytes) > max_bytes:
        return jsonify({
            'error': f'Image exceeds the {format_size(max_bytes)} upload limit.'
        }), 413

    try:
        image_url = upload_to_cloudinary(file_bytes, file.filename)
    except Exception as e:
        LoggingService.log_error_with_traceback('uploads', e, {'filename': file.filename})
        return jsonify({
            'error': 'Failed to upload image.',
            'details': str(e)
        }), 500

    return jsonify({'imageUrl': image_url})
