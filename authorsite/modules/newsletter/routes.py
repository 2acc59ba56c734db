"""
Newsletter Routes
=================

Provides:
- POST /subscribe -- create or refresh a subscription
"""

import logging

from flask import jsonify, current_app

from authorsite.core import ValidationError, current_identity, db_log
from authorsite.core.validation import parse_json_body, require_email, require_fields
from . import newsletter_bp
from .database import upsert_subscriber

logger = logging.getLogger(__name__)

SUBSCRIBED_MESSAGE = 'Successfully subscribed to newsletter!'
UPDATED_MESSAGE = 'Newsletter subscription updated!'


def _clean_preferences(value):
    """Preferences are an optional list of string tags"""
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(tag, str) for tag in value):
        raise ValidationError('Preferences must be a list of strings')
    return value


def _clean_source(value):
    if not value:
        return current_app.config.get('DEFAULT_SOURCE', 'website')
    if not isinstance(value, str):
        raise ValidationError('Source must be a string')
    return value


@newsletter_bp.route('/subscribe', methods=['POST'])
def subscribe():
    """Handle subscription requests; an existing email is refreshed, not duplicated"""
    data = parse_json_body()

    require_fields(data, ('name', 'email'), 'Name and email are required')
    require_email(data['email'])

    name = data['name']
    email = data['email']
    preferences = _clean_preferences(data.get('preferences'))
    source = _clean_source(data.get('source'))
    identity = current_identity()

    created = upsert_subscriber(identity.storage_value, name, email, preferences, source)

    if created:
        logger.info(f"New subscription added: {email}")
        db_log('info', 'newsletter', f'New subscriber: {email}', {'source': source})
        message = SUBSCRIBED_MESSAGE
    else:
        logger.info(f"Subscription refreshed for: {email}")
        db_log('info', 'newsletter', f'Subscription updated: {email}', {'source': source})
        message = UPDATED_MESSAGE

    return jsonify({
        'success': True,
        'message': message
    }), 200
