from datetime import datetime, timezone

from flask import jsonify

from . import health_bp

ALL_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE']


def _iso_now():
    """UTC now as ISO-8601 with millisecond precision and a Z suffix"""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


@health_bp.route('', methods=ALL_METHODS)
def health():
    """Liveness check; never touches the database"""
    return jsonify({
        'status': 'healthy',
        'timestamp': _iso_now()
    }), 200
