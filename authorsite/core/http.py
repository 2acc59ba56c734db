"""
Request/response plumbing applied once at the app level:
cross-origin headers, pre-flight short-circuit, identity loading and the
JSON error envelope.
"""

import logging

from flask import current_app, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .errors import ValidationError
from .identity import load_request_identity
from .logging_service import LoggingService

logger = logging.getLogger(__name__)


def _allowed_origins(app):
    origins = app.config.get('CORS_ORIGINS', '*')
    if isinstance(origins, str):
        origins = [o.strip() for o in origins.split(',') if o.strip()]
    return origins or ['*']


def _preflight_origin(origins):
    if '*' in origins:
        return '*'
    origin = request.headers.get('Origin')
    return origin if origin in origins else None


def init_cors(app):
    """Attach Flask-CORS to every route and answer OPTIONS on any path"""
    origins = _allowed_origins(app)
    methods = app.config.get('CORS_METHODS', ['GET', 'POST', 'OPTIONS'])
    headers = app.config.get('CORS_HEADERS', ['Content-Type'])

    CORS(
        app,
        origins=origins,
        methods=methods,
        allow_headers=headers,
        send_wildcard='*' in origins,
    )

    @app.before_request
    def handle_preflight():
        # Unknown paths included, so this runs before routing errors surface
        if request.method != 'OPTIONS':
            return None

        response = current_app.response_class(status=200)
        allow_origin = _preflight_origin(origins)
        if allow_origin:
            response.headers['Access-Control-Allow-Origin'] = allow_origin
        response.headers['Access-Control-Allow-Methods'] = ', '.join(methods)
        response.headers['Access-Control-Allow-Headers'] = ', '.join(headers)
        return response


def register_identity_loader(app):
    @app.before_request
    def load_identity():
        load_request_identity(current_app.config)


def register_error_handlers(app):
    """Every failure leaves as JSON with an 'error' key"""

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        logger.info(f"Rejected {request.method} {request.path}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        LoggingService.log_api_call('router', request.path, request.method, 404)
        return jsonify({'error': 'Endpoint not found'}), 404

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        LoggingService.log_api_call('router', request.path, request.method, 405)
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        if isinstance(error, HTTPException):
            return jsonify({'error': error.description}), error.code

        logger.exception(f"API Error on {request.method} {request.path}")
        LoggingService.log_error_with_traceback('router', error, {
            'method': request.method,
            'path': request.path,
        })
        return jsonify({
            'error': 'Internal server error',
            'details': str(error)
        }), 500
