"""
API Response Utilities - error bodies shared by the JSON endpoints

Error bodies always carry the human readable message under ``error`` so
clients can show it directly.
"""

from flask import jsonify
from functools import wraps
import logging

from apoxer.exceptions import ApoxerException

logger = logging.getLogger(__name__)


# API Error Codes
class ErrorCode:
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    CONFLICT = "CONFLICT"


DEFAULT_MESSAGES = {
    ErrorCode.VALIDATION_ERROR: "Invalid request parameters",
    ErrorCode.NOT_FOUND: "Resource not found",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred",
    ErrorCode.UNAUTHORIZED: "Authentication required",
    ErrorCode.CONFLICT: "Resource conflict",
}


def error_response(error_code=ErrorCode.INTERNAL_ERROR, message=None, status_code=400, log_error=True):
    """
    Standard error response format for API endpoints
    """
    message = message or DEFAULT_MESSAGES.get(error_code, "Request failed")
    response = {"error": message, "code": error_code}

    if log_error and error_code in [ErrorCode.INTERNAL_ERROR, ErrorCode.VALIDATION_ERROR]:
        logger.error(f"{error_code}: {message}")

    return jsonify(response), status_code


def handle_api_errors(f):
    """
    Decorator to standardize error handling for API endpoints
    Automatically catches exceptions and returns consistent error responses
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except ApoxerException as e:
            return jsonify(e.to_dict()), e.status_code
        except ValueError as e:
            return error_response(ErrorCode.VALIDATION_ERROR, message=str(e), status_code=400)
        except KeyError as e:
            return error_response(
                ErrorCode.VALIDATION_ERROR, message=f"Missing required parameter: {str(e)}", status_code=400
            )
        except Exception as e:
            logger.error(f"Unhandled exception in {f.__name__}: {e}", exc_info=True)
            return error_response(ErrorCode.INTERNAL_ERROR, message=str(e) or None, status_code=500)

    return wrapper


def not_found_response(resource_type, resource_id=None):
    """
    Convenience function for not found errors
    """
    if resource_id:
        message = f"{resource_type} '{resource_id}' not found"
    else:
        message = f"{resource_type} not found"
    return error_response(ErrorCode.NOT_FOUND, message=message, status_code=404)
