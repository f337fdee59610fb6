"""
Simple Logger for the Job Portal backend
A lightweight logging module without circular dependencies
"""

import os
import logging
import logging.handlers
from pathlib import Path

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)-24s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class SimpleLogger:
    """Process-wide logger registry for the job portal"""

    def __init__(self, log_dir=None):
        self.loggers = {}
        self.handlers = {}
        self.log_dir = Path(log_dir or os.environ.get(
            'JOBPORTAL_LOG_DIR',
            Path(__file__).parent.parent / 'logs'
        ))
        self._setup_logging()

    def _setup_logging(self):
        """Setup console and file handlers"""
        self.log_dir.mkdir(parents=True, exist_ok=True)
        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

        # Console only shows problems; everything else goes to files
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(formatter)
        self.handlers['console'] = console_handler

        self._setup_file_handlers(formatter)

    def _setup_file_handlers(self, formatter):
        """Setup rotating file handlers"""

        app_handler = logging.handlers.RotatingFileHandler(
            self.log_dir / 'jobportal_app.log', maxBytes=10*1024*1024, backupCount=5, encoding='utf-8'
        )
        app_handler.setLevel(logging.DEBUG)
        app_handler.setFormatter(formatter)

        error_handler = logging.handlers.RotatingFileHandler(
            self.log_dir / 'jobportal_errors.log', maxBytes=5*1024*1024, backupCount=3, encoding='utf-8'
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)

        access_handler = logging.handlers.RotatingFileHandler(
            self.log_dir / 'jobportal_access.log', maxBytes=10*1024*1024, backupCount=5, encoding='utf-8'
        )
        access_handler.setLevel(logging.INFO)
        access_handler.setFormatter(formatter)

        self.handlers.update({
            'app': app_handler,
            'error': error_handler,
            'access': access_handler
        })

    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger by name"""
        if name not in self.loggers:
            logger = logging.getLogger(f'jobportal.{name}')
            logger.propagate = False

            logger.addHandler(self.handlers['error'])
            if name == 'access':
                logger.addHandler(self.handlers['access'])
            else:
                logger.addHandler(self.handlers['app'])

            logger.addHandler(self.handlers['console'])
            logger.setLevel(logging.INFO)
            self.loggers[name] = logger

        return self.loggers[name]


# Global logger instance
_simple_logger = None


def get_simple_logger():
    """Get the global simple logger instance"""
    global _simple_logger
    if _simple_logger is None:
        _simple_logger = SimpleLogger()
    return _simple_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance"""
    return get_simple_logger().get_logger(name)
