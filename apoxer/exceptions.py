"""
Apoxer - Custom Exceptions and Exception Handlers
"""
import structlog
from flask import jsonify, render_template, request
from werkzeug.exceptions import HTTPException

logger = structlog.get_logger('exceptions')


class ApoxerException(Exception):
    """Base exception for Apoxer"""
    status_code = 400

    def __init__(self, message: str, code: str = "APOXER_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self):
        return {
            'error': self.message,
            'code': self.code,
        }


class NotFoundException(ApoxerException):
    """A requested row (game, profile, event...) does not exist"""
    status_code = 404

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, code="NOT_FOUND")
        logger.info(f"Not found: {message}")


class DatabaseException(ApoxerException):
    """Database-related exceptions"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message, code="DATABASE_ERROR")
        logger.error(f"Database error: {message}")


class ValidationException(ApoxerException):
    """Validation-related exceptions"""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")
        logger.warning(f"Validation error: {message}")


class ConflictException(ApoxerException):
    """Write rejected because the row already exists"""
    status_code = 409

    def __init__(self, message: str):
        super().__init__(message, code="CONFLICT")
        logger.warning(f"Conflict: {message}")


class AuthenticationException(ApoxerException):
    """Authentication-related exceptions"""
    status_code = 401

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="AUTH_ERROR")
        logger.warning(f"Authentication error: {message}")


class ProfileCreationError(ApoxerException):
    """The social profile of a signed-in user could not be created"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message, code="PROFILE_CREATION_ERROR")
        logger.error(f"Profile creation error: {message}")


def wants_json():
    return request.path.startswith('/api/') or request.accept_mimetypes.best == 'application/json'


def register_exception_handlers(app):
    """Register exception handlers with Flask app"""

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        """Handle HTTP exceptions"""
        if wants_json():
            return jsonify({
                'error': e.description,
                'code': e.name.upper().replace(' ', '_'),
            }), e.code
        return render_template('error.html', title=e.name, message=e.description), e.code

    @app.errorhandler(ProfileCreationError)
    def handle_profile_creation_error(e):
        """Render the dedicated profile error page"""
        if wants_json():
            return jsonify(e.to_dict()), e.status_code
        return render_template('profile/error.html', message=e.message), e.status_code

    @app.errorhandler(ApoxerException)
    def handle_apoxer_exception(e):
        """Handle Apoxer custom exceptions, status taken from the class"""
        if wants_json():
            return jsonify(e.to_dict()), e.status_code
        return render_template('error.html', title=e.code.replace('_', ' ').title(), message=e.message), e.status_code

    @app.errorhandler(Exception)
    def handle_generic_exception(e):
        """Handle all other exceptions"""
        logger.error(f"Unhandled exception: {e}", exc_info=True)
        if wants_json():
            return jsonify({
                'error': 'An unexpected error occurred',
                'code': 'INTERNAL_ERROR',
            }), 500
        return render_template('error.html', title='Something went wrong', message='An unexpected error occurred'), 500
