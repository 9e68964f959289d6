"""
Application factory.

    from sitefolio import create_app
    app = create_app()            # reads Config from the environment
    app = create_app(MyConfig)    # or any object with upper-case settings
"""

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import RequestEntityTooLarge

from .core.config import Config
from .core.database import init_database
from .core.logging_service import LoggingService
from .modules.projects import projects_bp
from .modules.uploads import uploads_bp

# Headroom for multipart boundaries and part headers around the image
MULTIPART_OVERHEAD_BYTES = 64 * 1024


def create_app(config=None):
    app = Flask(__name__)
    app.config.from_object(config or Config)

    LoggingService.configure(app.config.get('LOG_LEVEL', 'INFO'))

    _setup_upload_limit(app)
    _setup_cors(app)
    _setup_database(app)

    app.register_blueprint(projects_bp)
    app.register_blueprint(uploads_bp)

    @app.route('/health')
    def health():
        return jsonify({'status': 'ok'})

    @app.after_request
    def _log_request(response):
        LoggingService.log_api_call('app', request.path, request.method, response.status_code)
        return response

    return app


def _setup_upload_limit(app):
    """Refuse oversized bodies before Werkzeug parses them"""
    if app.config.get('MAX_CONTENT_LENGTH') is None:
        image_max = app.config.get('IMAGE_MAX_BYTES', 5 * 1024 * 1024)
        app.config['MAX_CONTENT_LENGTH'] = image_max + MULTIPART_OVERHEAD_BYTES

    @app.errorhandler(RequestEntityTooLarge)
    def _request_too_large(e):
        return jsonify({
            'error': 'Request body is too large.',
            'details': f"Limit is {app.config['MAX_CONTENT_LENGTH']} bytes."
        }), 413


def _setup_cors(app):
    """Flask-CORS for allowed origins, 403 for everyone else"""
    allowed = [origin.rstrip('/') for origin in app.config.get('CORS_ORIGINS', [])]

    CORS(app, origins=allowed)

    @app.before_request
    def _reject_unknown_origin():
        origin = request.headers.get('Origin')
        if origin and origin.rstrip('/') not in allowed:
            LoggingService.warning('cors', f"Rejected request from origin {origin}")
            return jsonify({'error': 'Origin not allowed.'}), 403
        return None


def _setup_database(app):
    if not init_database(app):
        LoggingService.warning('database', 'DATABASE_URL is not configured; project routes will return 500')
        return

    if not app.config.get('DB_AUTO_CREATE', True):
        return

    from .modules.projects.models import init_projects_db
    with app.app_context():
        try:
            init_projects_db()
        except Exception as e:
            LoggingService.log_error_with_traceback('database', e, 'Could not initialise the projects table')
