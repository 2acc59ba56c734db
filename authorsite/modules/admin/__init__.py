"""
Admin Stats Module
==================

Read-only aggregate counts:
- GET /api/admin/subscribers
- GET /api/admin/contacts

These routes are not gated. Which credential should protect them is still
an open decision; until it is made the caller identity is only logged.
"""

from flask import Blueprint

admin_bp = Blueprint(
    'admin',
    __name__,
    url_prefix='/api/admin'
)

from . import routes
