from pathlib import Path

import pytest
from utils.errors import UsageError
from utils.paths import sample_file_path


@pytest.mark.parametrize(
    'env_file, expected',
    [
        ('.env', '.env.sample'),
        ('config/.env', 'config/.env.sample'),
        ('/path/to/.env', '/path/to/.env.sample'),
        ('.env.local', '.env.local.sample'),
    ],
)
def test_sample_file_path(env_file, expected):
    """Test the sample suffix is appended to the file name."""
    assert sample_file_path(Path(env_file)) == Path(expected)


def test_sample_file_path_accepts_strings():
    assert sample_file_path('config/.env') == Path('config/.env.sample')


@pytest.mark.parametrize('env_file', ['/', '.', '..', 'config/..'])
def test_sample_file_path_without_file_name(env_file):
    """Paths with no file name component are a usage error."""
    with pytest.raises(UsageError, match="Cannot get filename"):
        sample_file_path(Path(env_file))
