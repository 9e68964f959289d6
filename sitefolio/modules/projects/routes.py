"""
Projects Routes
===============

- GET /api/projects: id, title, description, link_url, link_text, image_url
  for every project, ordered by id DESC
- POST /api/projects: JSON body with title, description, link_url,
  image_url and optional link_text (defaults to "Go to Site")
"""

from flask import request, jsonify
from . import projects_bp
from .models import get_all_projects_db, create_project_db
from sitefolio.core.logging_service import LoggingService

REQUIRED_FIELDS = ('title', 'description', 'link_url', 'image_url')


def _is_blank(value):
    # non-string values count as missing
    return not isinstance(value, str) or not value.strip()


@projects_bp.route('/projects', methods=['GET'])
def get_projects():
    """Get all projects"""
    try:
        projects = get_all_projects_db()
    except Exception as e:
        LoggingService.log_error_with_traceback('projects', e, 'Error fetching projects')
        return jsonify({
            'error': 'Failed to retrieve projects from database.',
            'details': str(e)
        }), 500

    return jsonify(projects)


@projects_bp.route('/projects', methods=['POST'])
def create_project():
    """Add a new project"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'Request body must be a JSON object.'}), 400

    missing = [field for field in REQUIRED_FIELDS if _is_blank(data.get(field))]
    if missing:
        return jsonify({
            'error': 'Missing required fields: title, description, link_url, or image_url.',
            'missing': missing
        }), 400

    link_text = data.get('link_text')
    if _is_blank(link_text):
        link_text = None

    try:
        new_site = create_project_db(
            title=data['title'],
            description=data['description'],
            link_url=data['link_url'],
            image_url=data['image_url'],
            link_text=link_text,
        )
    except Exception as e:
        LoggingService.log_error_with_traceback('projects', e, 'Error during site insertion')
        return jsonify({
            'error': 'Failed to insert site into database.',
            'details': str(e)
        }), 500

    LoggingService.info('projects', f"Created project {new_site['id']}")
    return jsonify({
        'message': 'Site added successfully to the database.',
        'newSite': new_site,
        'newProjectId': new_site['id']
    }), 201
