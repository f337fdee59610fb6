from typing import Any, Dict, Tuple

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from .exceptions import JobPortalError, create_error_response, get_http_status_code
from .simple_logger import get_logger

logger = get_logger("errors")


def register_error_handlers(app: Flask) -> None:
    """Translate every error into an HTTP status plus a {"message": ...} body"""

    @app.errorhandler(JobPortalError)
    def handle_job_portal_error(error: JobPortalError) -> Tuple[Dict[str, Any], int]:
        status_code = get_http_status_code(error)
        if status_code >= 500:
            logger.error(f"{error.error_code} on {request.method} {request.path}: {error.message}")
        else:
            logger.info(f"{error.error_code} on {request.method} {request.path}: {error.message}")
        return jsonify(create_error_response(error)), status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException) -> Tuple[Dict[str, Any], int]:
        logger.warning(f"HTTP {error.code} on {request.method} {request.path}: {error.description}")
        return jsonify({'message': error.description or error.name}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception) -> Tuple[Dict[str, Any], int]:
        logger.error(f"Unhandled error on {request.method} {request.path}: {error}", exc_info=True)
        return jsonify({'message': 'Internal server error'}), 500
