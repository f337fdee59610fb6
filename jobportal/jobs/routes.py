from flask import Blueprint, request, jsonify

from jobportal.auth.jwt_utils import admin_required, current_user
from jobportal.db import db
from jobportal.exceptions import ValidationError
from jobportal.models import Job
from jobportal.schemas import JobCreateRequest, JobUpdateRequest, parse_body
from jobportal.services.application_service import get_job_or_404, list_job_applications
from jobportal.simple_logger import get_logger

logger = get_logger("jobs")

jobs_bp = Blueprint('jobs', __name__)

STATUS_FILTERS = ('all', 'active', 'inactive')


@jobs_bp.route('', methods=['GET'])
@admin_required
def get_jobs():
    """List job postings for the admin dashboard"""
    status = request.args.get('status', 'all')
    search = request.args.get('search', '').strip()

    if status not in STATUS_FILTERS:
        raise ValidationError(f"status must be one of: {', '.join(STATUS_FILTERS)}")

    query = Job.query
    if status == 'active':
        query = query.filter_by(is_active=True)
    elif status == 'inactive':
        query = query.filter_by(is_active=False)

    if search:
        query = query.filter(
            db.or_(
                Job.title.contains(search, autoescape=True),
                Job.company.contains(search, autoescape=True),
                Job.location.contains(search, autoescape=True)
            )
        )

    jobs = query.order_by(Job.created_at.desc(), Job.id.desc()).all()
    return jsonify({
        'jobs': [job.to_dict() for job in jobs],
        'total': len(jobs)
    }), 200


@jobs_bp.route('', methods=['POST'])
@admin_required
def create_job():
    """Create a new job posting"""
    data = parse_body(JobCreateRequest, request.get_json(silent=True))
    user = current_user()

    job = Job(
        title=data.title,
        company=data.company,
        location=data.location,
        job_type=data.job_type,
        experience_level=data.experience_level,
        description=data.description,
        is_active=data.is_active,
        created_by=user.id
    )
    job.required_skills_list = data.required_skills

    try:
        db.session.add(job)
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.error(f"Error creating job for admin {user.id}", exc_info=True)
        raise

    logger.info(f"Job created: {job.id} by user {user.id}")
    return jsonify({
        'message': 'Job created successfully',
        'job': job.to_dict()
    }), 201


@jobs_bp.route('/<int:job_id>', methods=['GET'])
@admin_required
def get_job(job_id):
    return jsonify({'job': get_job_or_404(job_id).to_dict()}), 200


@jobs_bp.route('/<int:job_id>', methods=['PUT'])
@admin_required
def update_job(job_id):
    """Update a job posting; only the fields sent are changed"""
    job = get_job_or_404(job_id)
    data = parse_body(JobUpdateRequest, request.get_json(silent=True))

    changes = data.model_dump(exclude_unset=True)
    if 'required_skills' in changes:
        job.required_skills_list = changes.pop('required_skills') or []
    for field in ('title', 'company', 'is_active'):
        if field in changes and changes[field] is None:
            raise ValidationError(f'{field} cannot be empty')
    for field, value in changes.items():
        setattr(job, field, value)

    db.session.commit()
    logger.info(f"Job {job.id} updated by user {current_user().id}: {sorted(data.model_fields_set)}")
    return jsonify({
        'message': 'Job updated successfully',
        'job': job.to_dict()
    }), 200


@jobs_bp.route('/<int:job_id>', methods=['DELETE'])
@admin_required
def delete_job(job_id):
    job = get_job_or_404(job_id)
    db.session.delete(job)
    db.session.commit()
    logger.info(f"Job {job_id} deleted by user {current_user().id}")
    return jsonify({'message': 'Job deleted successfully'}), 200


@jobs_bp.route('/<int:job_id>/applications', methods=['GET'])
@admin_required
def get_job_applications(job_id):
    """Applications received by one posting"""
    applications = list_job_applications(job_id)
    return jsonify({
        'applications': [application.to_dict() for application in applications],
        'total': len(applications)
    }), 200
