"""
Newsletter Module
=================

Provides:
- POST /api/newsletter/subscribe -- subscribe, or refresh an existing subscription

Exported helpers:
- init_newsletter_db()
- get_subscriber_by_email(email)
- get_subscriber_stats(recent_days)
"""

from flask import Blueprint

newsletter_bp = Blueprint(
    'newsletter',
    __name__,
    url_prefix='/api/newsletter'
)

from . import routes
from .database import init_newsletter_db, get_subscriber_by_email, get_subscriber_stats

__all__ = ['newsletter_bp', 'init_newsletter_db', 'get_subscriber_by_email', 'get_subscriber_stats']
