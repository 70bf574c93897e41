import logging
from pathlib import Path

from utils.errors import UsageError

logger = logging.getLogger(__name__)

SAMPLE_SUFFIX = '.sample'


def sample_file_path(env_file) -> Path:
    """
    Return the sample file path for an env file.

    The suffix is appended to the file name and the directory is kept:

        >>> sample_file_path(Path('/path/to/.env'))
        PosixPath('/path/to/.env.sample')
    """
    env_file = Path(env_file)

    # Path('..').name is '..', which is a parent reference, not a file name
    if env_file.name in ('', '.', '..'):
        raise UsageError(f"Cannot get filename from env_file: '{env_file}'")

    sample_file = env_file.with_name(env_file.name + SAMPLE_SUFFIX)
    logger.debug("Derived sample file %s from %s", sample_file, env_file)
    return sample_file
