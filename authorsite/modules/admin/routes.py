import logging

from flask import jsonify, current_app

from authorsite.core import current_identity
from authorsite.modules.contact import get_contact_stats
from authorsite.modules.newsletter import get_subscriber_stats
from . import admin_bp

logger = logging.getLogger(__name__)


@admin_bp.route('/subscribers', methods=['GET'])
def subscriber_stats():
    """Subscriber totals: all rows, active rows, subscribed in the recent window"""
    logger.info(f"Subscriber stats requested by {current_identity().storage_value}")

    stats = get_subscriber_stats(current_app.config.get('NEWSLETTER_RECENT_DAYS', 30))
    return jsonify({
        'success': True,
        'stats': stats
    }), 200


@admin_bp.route('/contacts', methods=['GET'])
def contact_stats():
    """Contact totals: all rows, status 'new', submitted in the recent window"""
    logger.info(f"Contact stats requested by {current_identity().storage_value}")

    stats = get_contact_stats(current_app.config.get('CONTACT_RECENT_DAYS', 7))
    return jsonify({
        'success': True,
        'stats': stats
    }), 200
