import subprocess
import sys
import logging

from chefai.core.logging_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)


def run(port: int = 8000):
    logger.info("🚀 Starting ChefAI Ingredient Compatibility API...")
    logger.info(f"   👉 API:  http://localhost:{port}")
    logger.info(f"   👉 Docs: http://localhost:{port}/docs")
    logger.info("Press Ctrl+C to stop.")

    server = subprocess.Popen(
        ["uvicorn", "chefai.main:app", "--reload", "--port", str(port)],
        stdout=sys.stdout,
        stderr=sys.stderr
    )

    try:
        server.wait()
    except KeyboardInterrupt:
        logger.info("🛑 Stopping server...")
        server.terminate()
        logger.info("Done.")


if __name__ == "__main__":
    run()
