"""
Health Module
=============

Public /health endpoint for uptime monitors (no auth, any method).
"""

from flask import Blueprint

health_bp = Blueprint(
    'health',
    __name__,
    url_prefix='/health'
)

from . import routes
