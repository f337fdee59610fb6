from flask import Blueprint, request, jsonify

from jobportal.auth.jwt_utils import current_user, login_required
from jobportal.schemas import ApplicationRequest, parse_body
from jobportal.services import application_service
from jobportal.simple_logger import get_logger

logger = get_logger("applications")

applications_bp = Blueprint('applications', __name__)


@applications_bp.route('', methods=['POST'])
@login_required
def apply_for_job():
    """Apply for a job"""
    data = parse_body(ApplicationRequest, request.get_json(silent=True))
    application = application_service.apply(current_user().id, data.job_id)
    logger.info(f"Application {application.id} submitted via API for job {data.job_id}")
    return jsonify({
        'message': 'Application submitted successfully',
        'application': application.to_dict(include_job=True)
    }), 200


@applications_bp.route('/my', methods=['GET'])
@login_required
def get_my_applications():
    """Applications submitted by the logged-in user"""
    applications = application_service.list_applications(current_user().id)
    logger.info(f"User {current_user().id} listed {len(applications)} applications")
    return jsonify({
        'applications': [application.to_dict(include_job=True) for application in applications],
        'total': len(applications)
    }), 200
