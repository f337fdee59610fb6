import os
import tempfile

# Keep test logs out of the working tree
os.environ.setdefault('JOBPORTAL_LOG_DIR', tempfile.mkdtemp(prefix='jobportal-logs-'))

import pytest

from jobportal import create_app
from jobportal.config import Config
from jobportal.db import db
from jobportal.models import Job, User

ADMIN_EMAIL = 'admin@example.com'
PASSWORD = 'secret123'


class TestingConfig(Config):
    TESTING = True
    DEBUG = False
    SECRET_KEY = 'test-secret-key-with-enough-length-for-hs256'
    JWT_SECRET_KEY = 'test-jwt-secret-key-with-enough-length-for-hs256'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    ADMIN_EMAILS = [ADMIN_EMAIL]
    EXTERNAL_JOBS_API_URL = 'https://remote-jobs.test/api/remote-jobs'
    EXTERNAL_JOBS_LIMIT = 5
    EXTERNAL_JOBS_TIMEOUT = 2
    ENABLE_SERVICE_EXTERNAL_JOBS = True


@pytest.fixture
def app():
    """Create test application"""
    app = create_app(TestingConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()


def register(client, email='jane@example.com', **overrides):
    body = {
        'name': 'Jane Doe',
        'email': email,
        'password': PASSWORD,
        'skills': 'js, sql',
        'preferredLocation': 'Remote',
        'preferredJobType': 'Full-time',
        'experienceLevel': 'Mid',
    }
    body.update(overrides)
    return client.post('/api/auth/register', json=body)


def login(client, email='jane@example.com', password=PASSWORD):
    return client.post('/api/auth/login', json={'email': email, 'password': password})


def bearer(token):
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def user_headers(client):
    """Auth headers for a registered job seeker"""
    register(client)
    return bearer(login(client).get_json()['token'])


@pytest.fixture
def admin_headers(client):
    """Auth headers for a registered admin"""
    register(client, email=ADMIN_EMAIL, name='Admin')
    return bearer(login(client, email=ADMIN_EMAIL).get_json()['token'])


@pytest.fixture
def make_job(app):
    """Insert a job posting directly into the store"""
    def _make_job(title='Backend Developer', company='Acme', location='Remote', job_type='Full-time',
                  experience_level='Mid', required_skills=('js', 'python'), is_active=True):
        job = Job(
            title=title,
            company=company,
            location=location,
            job_type=job_type,
            experience_level=experience_level,
            is_active=is_active,
        )
        job.required_skills_list = list(required_skills)
        db.session.add(job)
        db.session.commit()
        return job
    return _make_job


@pytest.fixture
def make_user(app):
    """Insert a user directly into the store"""
    def _make_user(email='sam@example.com', skills=('js', 'sql'), preferred_location='Remote',
                   preferred_job_type='Full-time', experience_level='Mid'):
        user = User(
            name='Sam',
            email=email,
            password_hash='x',
            preferred_location=preferred_location,
            preferred_job_type=preferred_job_type,
            experience_level=experience_level,
        )
        user.skills_list = list(skills)
        db.session.add(user)
        db.session.commit()
        return user
    return _make_user
