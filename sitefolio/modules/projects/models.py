"""
Projects Models
===============

The `projects` table and the database helpers the routes use.
Rows leave this module only as plain dicts (see Project.to_dict).
"""

import logging

from sqlalchemy import select

from sitefolio.core.database import db, require_database

logger = logging.getLogger(__name__)

DEFAULT_LINK_TEXT = 'Go to Site'

# Columns exposed by the API, in response order
PUBLIC_COLUMNS = ('id', 'title', 'description', 'link_url', 'link_text', 'image_url')


class Project(db.Model):
    __tablename__ = 'projects'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=False)
    link_url = db.Column(db.Text, nullable=False)
    link_text = db.Column(db.Text, nullable=False, default=DEFAULT_LINK_TEXT,
                          server_default=DEFAULT_LINK_TEXT)
    image_url = db.Column(db.Text, nullable=False)

    def to_dict(self):
        return {column: getattr(self, column) for column in PUBLIC_COLUMNS}

    def __repr__(self):
        return f"<Project {self.id} {self.title!r}>"


def init_projects_db():
    """Create the projects table if it does not exist yet"""
    database = require_database()
    database.create_all()
    logger.info("Projects table ready")


def get_all_projects_db():
    """Every project, newest first"""
    database = require_database()
    projects = database.session.execute(
        select(Project).order_by(Project.id.desc())
    ).scalars()
    return [project.to_dict() for project in projects]


def create_project_db(title, description, link_url, image_url, link_text=None):
    """Insert one project and return it as a dict"""
    database = require_database()

    project = Project(
        title=title,
        description=description,
        link_url=link_url,
        image_url=image_url,
        link_text=link_text or DEFAULT_LINK_TEXT,
    )
    try:
        database.session.add(project)
        database.session.commit()
    except Exception:
        database.session.rollback()
        raise

    return project.to_dict()
