import os


def _env_flag(name, default='1'):
    return os.environ.get(name, default).lower() in ('1', 'true', 'yes')


def _env_list(name, default=''):
    return [item.strip() for item in os.environ.get(name, default).split(',') if item.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev')
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        'DATABASE_URL',
        'sqlite:///job_portal_ai.db'
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_recycle': 3600,      # Recycle connections every hour
        'pool_pre_ping': True,     # Verify connections before use
    }

    # Bearer tokens issued by /api/auth/login
    JWT_SECRET_KEY = os.environ.get('JWT_SECRET_KEY', SECRET_KEY)
    JWT_EXPIRES_HOURS = int(os.environ.get('JWT_EXPIRES_HOURS', '24'))

    # Accounts registered with one of these emails get the admin role
    ADMIN_EMAILS = [email.lower() for email in _env_list('ADMIN_EMAILS')]

    CORS_ORIGINS = _env_list('CORS_ORIGINS', '*')

    # Remote job listings proxied through /api/external-jobs
    EXTERNAL_JOBS_API_URL = os.environ.get('EXTERNAL_JOBS_API_URL', 'https://remotive.com/api/remote-jobs')
    EXTERNAL_JOBS_LIMIT = int(os.environ.get('EXTERNAL_JOBS_LIMIT', '30'))
    EXTERNAL_JOBS_TIMEOUT = float(os.environ.get('EXTERNAL_JOBS_TIMEOUT', '10'))

    # Service flags
    ENABLE_SERVICE_EXTERNAL_JOBS = _env_flag('ENABLE_SERVICE_EXTERNAL_JOBS')

    DEBUG = _env_flag('FLASK_DEBUG', '0')
    TESTING = _env_flag('FLASK_TESTING', '0')
