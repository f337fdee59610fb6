from .db import db
from datetime import datetime
import json

# Largest primary key the store can hold (signed 64-bit)
MAX_ID = 2**63 - 1


def _load_skills(raw):
    if not raw:
        return []
    try:
        skills = json.loads(raw)
    except (TypeError, ValueError):
        # Older rows may hold a plain comma separated string
        skills = str(raw).split(',')
    return [str(s).strip() for s in skills if str(s).strip()]


def _dump_skills(skills):
    return json.dumps(list(skills or []))


class User(db.Model):
    __tablename__ = "users"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), nullable=False, default='job_seeker')  # job_seeker, admin

    # Matching profile
    skills = db.Column(db.Text, nullable=True)  # JSON string of skills
    preferred_location = db.Column(db.String(100), nullable=True)
    preferred_job_type = db.Column(db.String(50), nullable=True)  # full-time, part-time, contract, internship
    experience_level = db.Column(db.String(50), nullable=True)  # entry, mid, senior

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    applications = db.relationship('JobApplication', backref='applicant', lazy='dynamic', cascade='all, delete-orphan')

    @property
    def skills_list(self):
        return _load_skills(self.skills)

    @skills_list.setter
    def skills_list(self, value):
        self.skills = _dump_skills(value)

    @property
    def is_admin(self):
        return self.role == 'admin'

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'role': self.role,
            'skills': self.skills_list,
            'preferredLocation': self.preferred_location,
            'preferredJobType': self.preferred_job_type,
            'experienceLevel': self.experience_level,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }


class Job(db.Model):
    __tablename__ = 'jobs'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    company = db.Column(db.String(100), nullable=False)
    location = db.Column(db.String(100), nullable=True)
    job_type = db.Column(db.String(50), nullable=True)
    experience_level = db.Column(db.String(50), nullable=True)
    required_skills = db.Column(db.Text, nullable=True)  # JSON string of skills
    description = db.Column(db.Text, nullable=True)
    is_active = db.Column(db.Boolean, default=True, nullable=False, index=True)

    created_by = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    creator = db.relationship('User', backref='created_jobs', foreign_keys=[created_by])
    applications = db.relationship('JobApplication', backref='job', lazy='dynamic', cascade='all, delete-orphan')

    @property
    def required_skills_list(self):
        return _load_skills(self.required_skills)

    @required_skills_list.setter
    def required_skills_list(self, value):
        self.required_skills = _dump_skills(value)

    def to_dict(self):
        return {
            'id': self.id,
            '_id': self.id,
            'title': self.title,
            'company': self.company,
            'location': self.location,
            'jobType': self.job_type,
            'experienceLevel': self.experience_level,
            'requiredSkills': self.required_skills_list,
            'description': self.description,
            'isActive': bool(self.is_active),
            'createdBy': self.created_by,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None,
        }


class JobApplication(db.Model):
    __tablename__ = 'job_applications'
    __table_args__ = (
        db.UniqueConstraint('user_id', 'job_id', name='uq_job_applications_user_job'),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    job_id = db.Column(db.Integer, db.ForeignKey('jobs.id'), nullable=False, index=True)
    status = db.Column(db.String(20), default='submitted', nullable=False)
    applied_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self, include_job=False):
        data = {
            'id': self.id,
            'userId': self.user_id,
            'jobId': self.job_id,
            'status': self.status,
            'appliedAt': self.applied_at.isoformat() if self.applied_at else None,
        }
        if include_job:
            data['job'] = self.job.to_dict() if self.job else None
        else:
            data['applicantName'] = self.applicant.name if self.applicant else None
            data['applicantEmail'] = self.applicant.email if self.applicant else None
        return data
