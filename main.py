# This is the entrypoint for the job portal backend.
import os
import sys

from jobportal import create_app
from jobportal.simple_logger import get_logger

logger = get_logger("main")

try:
    app = create_app()
except Exception as e:
    logger.critical(f"Startup failed: {e}")
    sys.exit(1)


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))
    app.run(host="0.0.0.0", port=port, debug=app.debug, use_reloader=False)
