import re

from flask import request

from .errors import ValidationError

# local@domain.tld, no whitespace and no extra '@' in any part
EMAIL_REGEX = re.compile(r'[^\s@]+@[^\s@]+\.[^\s@]+')

INVALID_EMAIL_MESSAGE = 'Invalid email format'
INVALID_BODY_MESSAGE = 'Invalid JSON body'


def validate_email(email):
    """Validate email format"""
    if not isinstance(email, str):
        return False
    return EMAIL_REGEX.fullmatch(email) is not None


def is_present(value):
    """A required field counts as present when it is a non-blank string"""
    return isinstance(value, str) and bool(value.strip())


def require_fields(data, fields, message):
    """Raise ValidationError(message) unless every field is present"""
    if not all(is_present(data.get(field)) for field in fields):
        raise ValidationError(message)


def require_email(email):
    if not validate_email(email):
        raise ValidationError(INVALID_EMAIL_MESSAGE)


def parse_json_body():
    """
    Parse the request body as a JSON object.

    The content type is not checked. Empty, malformed or non-object bodies
    raise ValidationError rather than falling through to a 500.
    """
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise ValidationError(INVALID_BODY_MESSAGE)
    return data
