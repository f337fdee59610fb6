"""
Recommendation Service
Ranks every active job posting for one user with the matchmaking scorer
"""
from typing import List, Optional

from jobportal.db import db
from jobportal.exceptions import NotFound
from jobportal.matchmaking import JobPosting, ScoredRecommendation, Scorer, UserProfile, score
from jobportal.models import Job, User
from jobportal.simple_logger import get_logger

logger = get_logger("recommendations")


def rank_jobs(profile: UserProfile, jobs, scorer: Optional[Scorer] = None) -> List[ScoredRecommendation]:
    """Score postings and order them by score (descending), then job id (ascending)"""
    score_fn = scorer.score if scorer else score
    scored = [score_fn(profile, job) for job in jobs]
    scored.sort(key=lambda rec: (-rec.score, rec.job.id))
    return scored


def recommend(user_id) -> List[ScoredRecommendation]:
    """
    Get the full ranked list of active jobs for a user.

    Args:
        user_id: The user ID

    Returns:
        List of ScoredRecommendation, best match first

    Raises:
        NotFound: if the user does not exist
    """
    user = db.session.get(User, user_id)
    if not user:
        raise NotFound('User not found')

    profile = UserProfile.from_user(user)
    postings = [JobPosting.from_job(job) for job in Job.query.filter_by(is_active=True).all()]

    recommendations = rank_jobs(profile, postings)
    logger.info(f"Scored {len(recommendations)} active jobs for user {user_id}")
    return recommendations
