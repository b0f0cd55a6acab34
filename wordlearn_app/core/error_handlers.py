"""
Error Handlers for wordlearn

Provides:
- Custom exception classes
- Consistent error response format
- Flask error handlers
"""

from flask import jsonify, render_template, request, current_app
from typing import Optional, Dict, Any


class WordlearnError(Exception):
    """Base exception class for wordlearn."""

    def __init__(
        self,
        message: str,
        code: str = 'UNKNOWN_ERROR',
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert error to dictionary for JSON response."""
        return {
            'success': False,
            'message': self.message,
            'code': self.code,
            'details': self.details
        }


class EmptyStoreError(WordlearnError):
    """The word store holds no words to pick from."""

    def __init__(self, message: str = 'No words available to learn'):
        super().__init__(
            message=message,
            code='EMPTY_STORE',
            status_code=503
        )


class FixtureError(WordlearnError):
    """Word fixture data could not be read or is malformed."""

    def __init__(self, message: str = 'Invalid word fixture data', path: str = None, index: int = None):
        details = {}
        if path:
            details['path'] = path
        if index is not None:
            details['index'] = index
        super().__init__(
            message=message,
            code='FIXTURE_ERROR',
            status_code=500,
            details=details or None
        )


def error_response(
    message: str,
    code: str = 'ERROR',
    status_code: int = 400,
    details: Dict = None
) -> tuple:
    """Create a standardized error response."""
    response = {
        'success': False,
        'message': message,
        'code': code
    }
    if details:
        response['details'] = details

    return jsonify(response), status_code


def success_response(data: Any = None, message: str = None) -> dict:
    """Create a standardized success response."""
    response = {'success': True}
    if data is not None:
        response['data'] = data
    if message:
        response['message'] = message
    return response


def register_error_handlers(app):
    """Register error handlers with Flask app."""

    @app.errorhandler(WordlearnError)
    def handle_wordlearn_error(error):
        current_app.logger.error(f"{error.code}: {error.message}")
        if request.path.startswith('/api/'):
            return jsonify(error.to_dict()), error.status_code
        return render_template('errors/error.html', error=error), error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        if request.path.startswith('/api/'):
            return error_response('Endpoint not found', 'NOT_FOUND', 404)
        return error

    @app.errorhandler(500)
    def handle_internal_error(error):
        current_app.logger.exception('Internal server error')
        if request.path.startswith('/api/'):
            return error_response('Internal server error', 'SERVER_ERROR', 500)
        return error
