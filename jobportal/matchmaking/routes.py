"""
API routes for job recommendations.
The ranked list is computed per request and returned to the caller.
"""

from flask import Blueprint, jsonify

from jobportal.auth.jwt_utils import current_user, login_required
from jobportal.services.recommendation_service import recommend
from jobportal.simple_logger import get_logger

logger = get_logger("matchmaking")

matchmaking_bp = Blueprint('matchmaking', __name__)


@matchmaking_bp.route('', methods=['GET'])
@login_required
def get_recommendations():
    """Ranked active jobs for the logged-in user"""
    recommendations = recommend(current_user().id)
    logger.info(f"Returned {len(recommendations)} recommendations to user {current_user().id}")
    return jsonify({
        'recommendations': [rec.to_dict() for rec in recommendations]
    }), 200
