import argparse
import logging
import sys
from pathlib import Path
from rich.console import Console

from utils.config import get_default_env_file, get_log_level
from utils.errors import EnvSyncError
from utils.examples import parse_examples
from utils.logging_utils import setup_logging
from utils.paths import sample_file_path
from utils.sample_generator import scrub_env_file
from utils.sample_summary import get_summary

__version__ = '0.1.0'

# initialize consoles for user-facing output
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def build_parser():
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog='envsync',
        description="Scrubs sensitive data from a .env file and generates an env.sample file",
    )
    parser.add_argument(
        'env_file',
        metavar='FILE',
        nargs='?',
        default=get_default_env_file(),
        help="Sets the .env file to create a .env.sample for (defaults to .env)",
    )
    parser.add_argument(
        '-s', '--sample-file',
        metavar='FILE',
        help="Sets the env.sample file to use (defaults to name of .env file with .sample appended)",
    )
    parser.add_argument(
        '-e', '--example',
        metavar='VAR=VALUE',
        action='append',
        default=[],
        help="Sets an example value for a specific environment variable (repeatable)",
    )
    parser.add_argument(
        '--summary',
        action='store_true',
        help="Print a table of the variables written to the sample file",
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help="Enable debug logging",
    )
    parser.add_argument(
        '-V', '--version',
        action='version',
        version=f"%(prog)s {__version__}",
    )
    return parser


def run(args):
    """Create the sample file described by parsed arguments."""
    env_file = Path(args.env_file)

    if args.sample_file:
        sample_file = Path(args.sample_file)
    else:
        sample_file = sample_file_path(env_file)

    console.print(f"Creating sample env file: {sample_file}", markup=False, highlight=False, soft_wrap=True)

    examples = parse_examples(args.example)
    sample_lines = scrub_env_file(env_file, sample_file, examples)

    if args.summary:
        console.print(get_summary(sample_lines), markup=False, highlight=False, soft_wrap=True)

    return sample_lines


def main(argv=None):
    args = build_parser().parse_args(argv)

    setup_logging('DEBUG' if args.verbose else get_log_level())

    try:
        run(args)
    except EnvSyncError as e:
        err_console.print(f"Error while creating sample env file: {e}", style='red', markup=False, highlight=False, soft_wrap=True)
        logger.debug("Failure details", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
