from flask import Blueprint, request, jsonify, current_app
from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash, check_password_hash

from jobportal.db import db
from jobportal.exceptions import AuthError, Conflict
from jobportal.models import User
from jobportal.schemas import LoginRequest, ProfileUpdateRequest, RegisterRequest, parse_body
from jobportal.simple_logger import get_logger
from .jwt_utils import current_user, issue_token, login_required

logger = get_logger("auth")

auth_bp = Blueprint('auth', __name__)


def _role_for(email):
    admin_emails = current_app.config.get('ADMIN_EMAILS') or []
    return 'admin' if email in admin_emails else 'job_seeker'


@auth_bp.route('/register', methods=['POST'])
def register():
    """Create an account with a matching profile"""
    data = parse_body(RegisterRequest, request.get_json(silent=True))
    email = data.email.lower()

    if User.query.filter_by(email=email).first():
        raise Conflict('An account with this email already exists')

    user = User(
        name=data.name,
        email=email,
        password_hash=generate_password_hash(data.password),
        role=_role_for(email),
        preferred_location=data.preferred_location,
        preferred_job_type=data.preferred_job_type,
        experience_level=data.experience_level,
    )
    user.skills_list = data.skills

    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        raise Conflict('An account with this email already exists') from e

    logger.info(f"Registered user {user.id} ({user.role})")
    return jsonify({'message': 'Registered successfully. You can now login.', 'user': user.to_dict()}), 200


@auth_bp.route('/login', methods=['POST'])
def login():
    data = parse_body(LoginRequest, request.get_json(silent=True))
    email = data.email.lower()

    user = User.query.filter_by(email=email).first()
    if not user or not check_password_hash(user.password_hash, data.password):
        logger.warning(f"Failed login attempt for {email}")
        raise AuthError('Invalid email or password')

    token = issue_token(user)
    logger.info(f"User {user.id} logged in")
    return jsonify({'token': token, 'user': user.to_dict()}), 200


@auth_bp.route('/me', methods=['GET'])
@login_required
def get_profile():
    return jsonify({'user': current_user().to_dict()}), 200


@auth_bp.route('/me', methods=['PUT'])
@login_required
def update_profile():
    """Update the caller's name and matching profile"""
    data = parse_body(ProfileUpdateRequest, request.get_json(silent=True))
    user = current_user()

    changes = data.model_dump(exclude_unset=True)
    if 'skills' in changes:
        user.skills_list = changes.pop('skills') or []
    if changes.get('name') is None:
        changes.pop('name', None)
    for field, value in changes.items():
        setattr(user, field, value)

    db.session.commit()
    logger.info(f"User {user.id} updated profile fields: {sorted(data.model_fields_set)}")
    return jsonify({'message': 'Profile updated', 'user': user.to_dict()}), 200
