from .routes import external_jobs_bp

__all__ = ["external_jobs_bp"]
