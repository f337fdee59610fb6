import os
import time
import importlib
from dotenv import load_dotenv
from jobportal.simple_logger import get_logger

# Load environment variables from the project root
load_dotenv(os.path.join(os.path.dirname(__file__), '..', '.env'))
from flask import Flask, jsonify, g, request
from flask_cors import CORS
from sqlalchemy.exc import SQLAlchemyError
from .config import Config
from .db import db
from .errors import register_error_handlers

from datetime import datetime

__version__ = "1.0.0"

logger = get_logger('app')
access_logger = get_logger('access')


def setup_access_logging(app):
    """Write one access line per request: method, path, status and duration"""

    @app.before_request
    def start_timer():
        g.start_time = time.time()

    @app.after_request
    def log_access(response):
        duration_ms = (time.time() - g.start_time) * 1000 if hasattr(g, 'start_time') else 0.0
        access_logger.info(
            f"{request.remote_addr} {request.method} {request.path} "
            f"{response.status_code} {duration_ms:.1f}ms"
        )
        return response


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.debug = app.config.get('DEBUG', False)
    app.logger = logger
    logger.info("Job portal backend application starting up")

    CORS(app,
         origins=app.config.get('CORS_ORIGINS') or '*',
         methods=['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS'],
         allow_headers=['Content-Type', 'Authorization'],
         max_age=3600
    )

    db.init_app(app)

    from .auth.jwt_utils import init_jwt
    init_jwt(app)

    register_error_handlers(app)
    setup_access_logging(app)

    def register_module(module_name, module_path, blueprint_name, url_prefix="", config_flag=None, default_enabled=True):
        """Register a blueprint, honouring an optional feature flag."""
        enabled = default_enabled if config_flag is None else app.config.get(config_flag, default_enabled)
        if not enabled:
            logger.info(f"{module_name} module disabled via config flag {config_flag}")
            return None

        module = importlib.import_module(module_path)
        blueprint = getattr(module, blueprint_name)
        app.register_blueprint(blueprint, url_prefix=url_prefix)
        logger.info(f"Registered {module_name} module at {url_prefix or '/'}")
        return blueprint

    module_registrations = [
        {"module_name": "auth", "module_path": "jobportal.auth.routes", "blueprint_name": "auth_bp", "url_prefix": "/api/auth"},
        {"module_name": "recommend", "module_path": "jobportal.matchmaking.routes", "blueprint_name": "matchmaking_bp", "url_prefix": "/api/recommend"},
        {"module_name": "jobs", "module_path": "jobportal.jobs.routes", "blueprint_name": "jobs_bp", "url_prefix": "/api/jobs"},
        {"module_name": "applications", "module_path": "jobportal.applications.routes", "blueprint_name": "applications_bp", "url_prefix": "/api/applications"},
        {"module_name": "external_jobs", "module_path": "jobportal.integrations.routes", "blueprint_name": "external_jobs_bp", "url_prefix": "/api/external-jobs", "config_flag": "ENABLE_SERVICE_EXTERNAL_JOBS", "default_enabled": True},
    ]

    for module_config in module_registrations:
        register_module(**module_config)

    # The process cannot serve anything without its database
    with app.app_context():
        try:
            from . import models  # noqa: F401  (registers tables)
            db.create_all()
        except SQLAlchemyError as e:
            logger.critical(f"Database connection failed: {e}")
            raise

    @app.route("/")
    def index():
        if app.debug:
            return "Job portal backend is running in DEBUG mode!", 200
        return "Job portal backend is running!", 200

    @app.route("/health")
    def health_check():
        return jsonify({
            "status": "healthy",
            "timestamp": datetime.utcnow().isoformat(),
            "version": __version__
        }), 200

    logger.info("Job portal backend application started successfully")
    return app
