import os
from dotenv import load_dotenv

# tool settings live in .envsync, never in the .env being scrubbed
load_dotenv('.envsync')


def get_default_env_file():
    """Source file used when none is given on the command line."""
    return os.getenv('ENVSYNC_ENV_FILE', '.env')


def get_log_level():
    """Log level used when --verbose is not set."""
    return os.getenv('ENVSYNC_LOG_LEVEL', 'WARNING').upper()
