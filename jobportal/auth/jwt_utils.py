"""
JWT Utilities
Issues bearer tokens at login and guards routes that need an authenticated user
"""

from datetime import timedelta
from functools import wraps

from flask import g, jsonify
from flask_jwt_extended import (
    JWTManager,
    create_access_token,
    get_jwt_identity,
    verify_jwt_in_request,
)

from jobportal.db import db
from jobportal.exceptions import AuthError, ForbiddenError
from jobportal.models import User
from jobportal.simple_logger import get_logger

logger = get_logger("auth")

jwt_manager = JWTManager()


def init_jwt(app):
    """Configure flask-jwt-extended for Authorization: Bearer tokens"""
    app.config["JWT_SECRET_KEY"] = app.config.get("JWT_SECRET_KEY") or app.config["SECRET_KEY"]
    app.config["JWT_TOKEN_LOCATION"] = ["headers"]
    app.config["JWT_HEADER_TYPE"] = "Bearer"
    app.config["JWT_ALGORITHM"] = "HS256"
    app.config["JWT_ACCESS_TOKEN_EXPIRES"] = timedelta(hours=app.config.get("JWT_EXPIRES_HOURS", 24))
    jwt_manager.init_app(app)


# Token failures use the same {"message": ...} body as every other error
@jwt_manager.unauthorized_loader
def _missing_token(reason):
    logger.info(f"[JWT] Missing token: {reason}")
    return jsonify({"message": "Authorization token missing. Please log in."}), 401


@jwt_manager.invalid_token_loader
def _invalid_token(reason):
    logger.warning(f"[JWT] Invalid token: {reason}")
    return jsonify({"message": "Invalid authorization token. Please log in again."}), 401


@jwt_manager.expired_token_loader
def _expired_token(jwt_header, jwt_payload):
    logger.info(f"[JWT] Expired token for user {jwt_payload.get('sub')}")
    return jsonify({"message": "Session expired. Please log in again."}), 401


def issue_token(user):
    """Create a bearer token for a user"""
    return create_access_token(
        identity=str(user.id),
        additional_claims={"email": user.email, "role": user.role},
    )


def _load_current_user():
    verify_jwt_in_request()
    identity = get_jwt_identity()
    try:
        user = db.session.get(User, int(identity))
    except (TypeError, ValueError):
        user = None
    if not user:
        # Token is well-formed but the account is gone
        raise AuthError("User for this token no longer exists")
    g.current_user = user
    return user


def login_required(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        _load_current_user()
        return f(*args, **kwargs)
    return wrapper


def admin_required(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        user = _load_current_user()
        if not user.is_admin:
            logger.warning(f"[JWT] User {user.id} denied admin route")
            raise ForbiddenError("Admin access required")
        return f(*args, **kwargs)
    return wrapper


def current_user():
    """The user loaded by login_required/admin_required for this request"""
    return g.current_user
