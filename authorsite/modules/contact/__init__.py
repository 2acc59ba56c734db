"""
Contact Module
==============

Provides:
- POST /api/contact -- store a contact-form message

Every valid submission is a new row with status 'new'.
"""

from flask import Blueprint

contact_bp = Blueprint('contact', __name__)

from . import routes
from .database import init_contact_db, get_contact_stats

__all__ = ['contact_bp', 'init_contact_db', 'get_contact_stats']
