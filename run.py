import subprocess
import time
import sys
import os
import logging

# Setup basic logging for run.py
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


def run():
    logger.info("🚀 Starting Recipe Explorer...")

    # Streamlit runs the frontend as a script, so expose the project root to it
    env = dict(os.environ)
    project_root = os.path.dirname(os.path.abspath(__file__))
    env["PYTHONPATH"] = os.pathsep.join(p for p in (project_root, env.get("PYTHONPATH")) if p)

    # 1. Start Backend
    logger.info("➡️  Starting Backend API (Uvicorn)...")
    backend = subprocess.Popen(
        ["uvicorn", "recipe_explorer.main:app", "--reload", "--port", "8000"],
        stdout=sys.stdout,
        stderr=sys.stderr,
        env=env
    )

    # Give the backend a moment before the UI starts calling it
    time.sleep(2)

    # 2. Start Frontend
    logger.info("➡️  Starting Frontend UI (Streamlit)...")
    frontend = subprocess.Popen(
        ["streamlit", "run", "recipe_explorer/frontend.py", "--server.port", "8501"],
        stdout=sys.stdout,
        stderr=sys.stderr,
        env=env
    )

    logger.info("✅ Recipe Explorer is running:")
    logger.info("   👉 UI:  http://localhost:8501")
    logger.info("   👉 API: http://localhost:8000")
    logger.info("Press Ctrl+C to stop everything.")

    try:
        backend.wait()
        frontend.wait()
    except KeyboardInterrupt:
        logger.info("🛑 Stopping application...")
        backend.terminate()
        frontend.terminate()
        logger.info("Done.")


if __name__ == "__main__":
    run()
