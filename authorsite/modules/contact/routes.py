import logging

from flask import jsonify

from authorsite.core import current_identity, db_log
from authorsite.core.validation import parse_json_body, require_email, require_fields
from . import contact_bp
from .database import save_contact_submission

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('name', 'email', 'subject', 'message')
SENT_MESSAGE = 'Message sent successfully! Thank you for reaching out.'


@contact_bp.route('/api/contact', methods=['POST'])
def submit_contact():
    """Validate and store a contact-form message"""
    data = parse_json_body()

    require_fields(data, REQUIRED_FIELDS, 'All fields (name, email, subject, message) are required')
    require_email(data['email'])

    submission_id = save_contact_submission(
        current_identity().storage_value,
        data['name'],
        data['email'],
        data['subject'],
        data['message'],
    )

    logger.info(f"Contact submission {submission_id} from: {data['email']}")
    db_log('info', 'contact', f"New contact message: {data['subject']}", {
        'id': submission_id,
        'email': data['email'],
    })

    return jsonify({
        'success': True,
        'message': SENT_MESSAGE
    }), 200
