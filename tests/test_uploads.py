"""
Image upload tests. Cloudinary is never contacted: cloudinary.uploader.upload is patched.
"""

import io
from unittest.mock import patch

import cloudinary.exceptions

from sitefolio.modules.uploads.routes import format_size

PNG_BYTES = b'\x89PNG\r\n\x1a\n' + b'\x00' * 64
HOSTED_URL = 'https://res.cloudinary.com/demo/image/upload/v1/portfolio-projects/abc123.png'
FIVE_MB = 5 * 1024 * 1024

UPLOAD = 'sitefolio.core.storage.cloudinary.uploader.upload'


def _post_image(client, content=PNG_BYTES, filename='shot.png', field='imageFile'):
    return client.post(
        '/api/upload-image',
        data={field: (io.BytesIO(content), filename, 'image/png')},
        content_type='multipart/form-data',
    )


def _uploaded(url=HOSTED_URL):
    return {'public_id': 'portfolio-projects/abc123', 'secure_url': url}


def test_upload_without_file(client):
    response = client.post('/api/upload-image', data={}, content_type='multipart/form-data')
    assert response.status_code == 400


def test_upload_with_wrong_field_name(client):
    with patch(UPLOAD) as upload:
        response = _post_image(client, field='image')
        upload.assert_not_called()
    assert response.status_code == 400


def test_upload_with_empty_filename(client):
    response = _post_image(client, filename='')
    assert response.status_code == 400


def test_upload_without_credentials(app_factory):
    client = app_factory(CLOUDINARY_API_SECRET=None).test_client()

    with patch(UPLOAD) as upload:
        response = _post_image(client)
        upload.assert_not_called()

    assert response.status_code == 500
    assert 'api_secret' in response.get_json()['details']


def test_upload_success(client):
    with patch(UPLOAD, return_value=_uploaded()) as upload:
        response = _post_image(client)

    assert response.status_code == 200
    assert response.get_json() == {'imageUrl': HOSTED_URL}

    assert upload.call_args.args[0] == PNG_BYTES
    options = upload.call_args.kwargs
    assert options['folder'] == 'portfolio-projects'
    assert options['resource_type'] == 'image'
    assert options['cloud_name'] == 'demo'
    assert options['api_key'] == '123456789012345'
    assert options['api_secret'] == 'test-secret'


# ---------------------------------------------------------------------------
# Size limits -- per-file ceiling and whole-request ceiling
# ---------------------------------------------------------------------------

def test_upload_at_five_mb_is_accepted(client):
    with patch(UPLOAD, return_value=_uploaded()) as upload:
        response = _post_image(client, content=b'\x00' * FIVE_MB)

    assert response.status_code == 200
    assert len(upload.call_args.args[0]) == FIVE_MB


def test_upload_over_five_mb_is_rejected(client):
    with patch(UPLOAD) as upload:
        response = _post_image(client, content=b'\x00' * (FIVE_MB + 1))
        upload.assert_not_called()

    assert response.status_code == 413
    assert response.get_json()['error'] == 'Image exceeds the 5 MB upload limit.'


def test_upload_limit_message_for_small_limit(app_factory):
    client = app_factory(IMAGE_MAX_BYTES=16).test_client()

    with patch(UPLOAD) as upload:
        response = _post_image(client)
        upload.assert_not_called()

    assert response.status_code == 413
    assert response.get_json()['error'] == 'Image exceeds the 16 bytes upload limit.'


def test_oversized_request_refused_before_route(app_factory):
    app = app_factory(IMAGE_MAX_BYTES=1024)
    client = app.test_client()

    with patch('sitefolio.modules.uploads.routes.get_cloudinary_config') as get_config:
        response = _post_image(client, content=b'\x00' * (256 * 1024))
        get_config.assert_not_called()

    assert response.status_code == 413
    assert response.get_json()['error'] == 'Request body is too large.'


def test_request_limit_leaves_room_for_multipart(app):
    assert app.config['MAX_CONTENT_LENGTH'] > FIVE_MB


def test_format_size():
    assert format_size(FIVE_MB) == '5 MB'
    assert format_size(512 * 1024) == '512 KB'
    assert format_size(16) == '16 bytes'


# ---------------------------------------------------------------------------
# Cloudinary failures
# ---------------------------------------------------------------------------

def test_upload_rejected_by_host(client):
    with patch(UPLOAD, side_effect=cloudinary.exceptions.AuthorizationRequired('Invalid Signature')):
        response = _post_image(client)

    assert response.status_code == 500
    body = response.get_json()
    assert body['error'] == 'Failed to upload image.'
    assert 'Invalid Signature' in body['details']


def test_upload_host_unreachable(client):
    with patch(UPLOAD, side_effect=cloudinary.exceptions.Error('Unexpected error - MaxRetryError')):
        response = _post_image(client)

    assert response.status_code == 500
    assert 'MaxRetryError' in response.get_json()['details']


def test_upload_response_without_url(client):
    with patch(UPLOAD, return_value={'public_id': 'abc123'}):
        response = _post_image(client)

    assert response.status_code == 500


def test_upload_does_not_touch_projects(client):
    with patch(UPLOAD, return_value=_uploaded()):
        _post_image(client)

    assert client.get('/api/projects').get_json() == []
