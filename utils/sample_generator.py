"""
Turn the contents of a .env file into a secret-free sample.

Every variable keeps its name and position but loses its value:
- comments and blank lines are copied as they are
- a variable with an example value gets that value
- every other variable gets a <NAME> placeholder

Values in the source are never read, so nothing secret can leak into
the sample even when a line is malformed.
"""

import logging
from collections import namedtuple
from pathlib import Path

from utils.errors import InputError, OutputError

logger = logging.getLogger(__name__)

SampleLine = namedtuple('SampleLine', ['kind', 'name', 'value', 'source', 'text'])


def split_lines(content):
    """Split text into lines the same way for LF and CRLF files."""
    lines = content.split('\n')

    # a trailing newline ends the last line, it does not start a new one
    if lines and lines[-1] == '':
        lines.pop()

    return [line[:-1] if line.endswith('\r') else line for line in lines]


def placeholder(name):
    """Return the placeholder written for a variable with no example."""
    return f"<{name}>"


def iter_sample_lines(env_content, examples):
    """Yield one SampleLine per line of env_content, in order."""
    for line in split_lines(env_content):
        if line.startswith('#'):
            yield SampleLine('comment', None, None, None, f"{line}\n")
            continue

        if not line.strip():
            yield SampleLine('blank', None, None, None, f"{line}\n")
            continue

        # only the part before the first '=' is kept
        env_var = line.split('=', 1)[0]

        if env_var in examples:
            value, source = examples[env_var], 'example'
        else:
            value, source = placeholder(env_var), 'placeholder'

        yield SampleLine('variable', env_var, value, source, f"{env_var}={value}\n")


def create_sample_content(env_content, examples=None):
    """Return the sample file text for the given .env text."""
    return ''.join(line.text for line in iter_sample_lines(env_content, examples or {}))


def scrub_env_file(env_file, sample_file, examples=None):
    """
    Read env_file, scrub its values and write the result to sample_file.

    Returns the generated SampleLine records so the caller can report on
    them. Raises InputError or OutputError when a file cannot be used.
    """
    env_file = Path(env_file)
    sample_file = Path(sample_file)
    examples = examples or {}

    try:
        with open(env_file, 'r', encoding='utf-8', newline='') as f:
            env_content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Could not read .env file '{env_file}': {e}") from e

    sample_lines = list(iter_sample_lines(env_content, examples))
    sample_content = ''.join(line.text for line in sample_lines)

    logger.debug(
        "Scrubbed %d line(s) from %s, %d example value(s) applied",
        len(sample_lines),
        env_file,
        sum(1 for line in sample_lines if line.source == 'example'),
    )

    try:
        with open(sample_file, 'w', encoding='utf-8', newline='') as f:
            f.write(sample_content)
    except OSError as e:
        raise OutputError(f"Cannot write to env.sample file '{sample_file}': {e}") from e

    logger.debug("Wrote %s", sample_file)
    return sample_lines
