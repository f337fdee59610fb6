"""
Application Service
Records job applications; one application per user and job
"""
from sqlalchemy.exc import IntegrityError

from jobportal.db import db
from jobportal.exceptions import Conflict, NotFound, ValidationError
from jobportal.models import MAX_ID, Job, JobApplication, User
from jobportal.simple_logger import get_logger

logger = get_logger("applications")


def get_job_or_404(job_id) -> Job:
    """Load a job posting by id; ids beyond the store range are simply unknown"""
    job = db.session.get(Job, job_id) if 1 <= job_id <= MAX_ID else None
    if not job:
        raise NotFound('Job not found')
    return job


def apply(user_id, job_id) -> JobApplication:
    """
    Submit an application from a user to a job posting.

    Raises:
        NotFound: unknown user or job
        ValidationError: the job is not active
        Conflict: the user already applied to this job
    """
    user = db.session.get(User, user_id)
    if not user:
        raise NotFound('User not found')

    job = get_job_or_404(job_id)

    if not job.is_active:
        raise ValidationError('This job is no longer accepting applications')

    existing_application = JobApplication.query.filter_by(user_id=user.id, job_id=job.id).first()
    if existing_application:
        raise Conflict('You have already applied for this job')

    application = JobApplication(user_id=user.id, job_id=job.id)
    db.session.add(application)
    try:
        db.session.commit()
    except IntegrityError as e:
        # A concurrent request inserted the same (user, job) pair first
        db.session.rollback()
        logger.warning(f"Duplicate application rejected by store: user={user.id} job={job.id}")
        raise Conflict('You have already applied for this job') from e

    logger.info(f"User {user.id} applied for job {job.id}")
    return application


def list_applications(user_id):
    """Applications submitted by a user, newest first"""
    return (
        JobApplication.query
        .filter_by(user_id=user_id)
        .order_by(JobApplication.applied_at.desc(), JobApplication.id.desc())
        .all()
    )


def list_job_applications(job_id):
    """Applications received by a job posting, oldest first"""
    job = get_job_or_404(job_id)
    return job.applications.order_by(JobApplication.applied_at.asc(), JobApplication.id.asc()).all()
