"""
Configuration for pytest.
"""
import os
import sys
import tempfile
from pathlib import Path

# Add the project root directory to the Python path
project_root = Path(__file__).parent.absolute()
sys.path.insert(0, str(project_root))

# Keep test runs from writing into ./logs
os.environ.setdefault("LOG_DIRECTORY", tempfile.mkdtemp(prefix="mention_bot_logs_"))
os.environ.setdefault("CONSOLE_LOGGING_ENABLED", "FALSE")

# Load environment variables at test time
from dotenv import load_dotenv
load_dotenv()


def pytest_sessionstart(session):
    """
    Called after the Session object has been created and before tests are collected.
    """
    print(f"Running tests with Python {sys.version}")
    print(f"Project root: {project_root}")
    print(f"Test directory: {os.getcwd()}")


def pytest_configure(config):
    config.addinivalue_line("markers", "critical: core behaviour that must never regress")
