"""
Core configuration settings for the roster manager.
"""
import os
import sys
import logging
from pathlib import Path
from dotenv import load_dotenv


logger = logging.getLogger(__name__)


# Base directories
BASE_DIR = Path(__file__).resolve().parent.parent
LOGS_DIR = BASE_DIR / "logs"


def load_environment_variables():
    """Explicitly load environment variables from .env file"""
    try:
        load_dotenv(dotenv_path=BASE_DIR / '.env')
        logger.debug("Loaded environment variables from .env")
    except Exception as e:
        logger.error(f"Error loading .env file: {e}")

load_environment_variables()


def _env_int(name: str, default: int) -> int:
    """Read an integer from the environment, falling back to the default."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid integer for {name}: {raw!r}, using {default}")
        return default


# Roster Configuration
ROSTER_CAPACITY = _env_int('ROSTER_CAPACITY', 10)
AUTOMATIC_ROSTER_PREFIX = os.getenv('AUTOMATIC_ROSTER_PREFIX', 'Automatic Roster')

# Logging Configuration
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
LOG_FILE = Path(os.getenv('LOG_FILE', str(LOGS_DIR / "roster_manager.log")))
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def check_settings():
    """Check that the roster settings are usable."""
    problems = []

    if ROSTER_CAPACITY <= 0:
        problems.append(f"ROSTER_CAPACITY must be greater than zero, got {ROSTER_CAPACITY}")

    if not AUTOMATIC_ROSTER_PREFIX:
        problems.append("AUTOMATIC_ROSTER_PREFIX must not be empty")

    # In testing mode, don't exit on bad settings
    is_testing = 'PYTEST_CURRENT_TEST' in os.environ or 'unittest' in sys.modules

    if problems and not is_testing:
        for problem in problems:
            logger.error(f"ERROR: {problem}")
        sys.exit(1)
    elif problems:
        for problem in problems:
            logger.warning(problem)
        logger.warning("Running in test mode, so continuing anyway.")

    return not problems
