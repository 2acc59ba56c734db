"""
authorsite - Author Website Backend
===================================

Flask backend for an author's website:
- Newsletter subscriptions (one row per email, refreshed on re-subscribe)
- Contact-form submissions
- Aggregate subscriber/contact stats
- Health check

Usage:
    from authorsite import create_app

    app = create_app({'DATABASE_PATH': '/srv/data/site.db'})

Or as an extension on an existing app:
    from authorsite import AuthorSite

    AuthorSite(app)
"""

__version__ = '0.1.0'

import logging

from flask import Flask

from .core import Config
from .core.http import init_cors, register_error_handlers, register_identity_loader
from .commands import cleanup_logs_command, init_database, init_db_command
from .modules.admin import admin_bp
from .modules.contact import contact_bp
from .modules.health import health_bp
from .modules.newsletter import newsletter_bp

BLUEPRINTS = [newsletter_bp, contact_bp, admin_bp, health_bp]


class AuthorSite:
    """Registers the authorsite blueprints and request plumbing on a Flask app."""

    def __init__(self, app=None, config=None):
        self._registered = []
        if app is not None:
            self.init_app(app, config)

    def init_app(self, app, config=None):
        for key, value in Config.as_dict().items():
            app.config.setdefault(key, value)
        if config:
            app.config.update(config)

        # Pre-flight must run before the identity loader
        init_cors(app)
        register_identity_loader(app)
        register_error_handlers(app)

        for blueprint in BLUEPRINTS:
            app.register_blueprint(blueprint)
            self._registered.append(blueprint.name)

        app.cli.add_command(init_db_command)
        app.cli.add_command(cleanup_logs_command)

        with app.app_context():
            init_database()

        app.extensions['authorsite'] = self

    def get_registered_modules(self):
        return list(self._registered)


def create_app(config=None):
    """Application factory"""
    app = Flask(__name__)
    AuthorSite(app, config)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )
    return app


__all__ = ['AuthorSite', 'create_app']
