from flask import Blueprint, request, jsonify, current_app

from jobportal.auth.jwt_utils import current_user, login_required
from jobportal.services.external_jobs import RemotiveClient
from jobportal.simple_logger import get_logger

logger = get_logger("integrations")

external_jobs_bp = Blueprint('external_jobs', __name__)


@external_jobs_bp.route('', methods=['GET'])
@login_required
def get_external_jobs():
    """Live remote jobs from the external listing API"""
    search = request.args.get('search', '')
    client = RemotiveClient.from_config(current_app.config)
    jobs = client.search(search)
    logger.info(f"Served {len(jobs)} external jobs to user {current_user().id}")
    return jsonify({'jobs': jobs, 'total': len(jobs)}), 200
