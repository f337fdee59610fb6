"""
Custom exceptions for the job portal
Every error surfaced over HTTP derives from JobPortalError and carries its status code
"""

from typing import Optional, Dict, Any


class JobPortalError(Exception):
    """Base exception for all job portal errors"""

    status_code = 500

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ValidationError(JobPortalError):
    """Raised when input validation fails"""
    status_code = 400


class AuthError(JobPortalError):
    """Raised when the bearer token is missing or invalid, or credentials are wrong"""
    status_code = 401


class ForbiddenError(JobPortalError):
    """Raised when an authenticated user lacks the required role"""
    status_code = 403


class NotFound(JobPortalError):
    """Raised when a user, job or application does not exist"""
    status_code = 404


class Conflict(JobPortalError):
    """Raised on duplicate registrations and duplicate applications"""
    status_code = 409


class UpstreamError(JobPortalError):
    """Raised when the external job listing API answers with an error"""
    status_code = 502


class NetworkError(UpstreamError):
    """Raised when the external job listing API cannot be reached"""
    status_code = 503


def get_http_status_code(error: Exception) -> int:
    """Map an exception to the HTTP status it is reported with"""
    if isinstance(error, JobPortalError):
        return error.status_code
    return 500


def create_error_response(error: JobPortalError) -> Dict[str, Any]:
    """Create the JSON body sent to clients for a JobPortalError"""
    return {'message': error.message}
