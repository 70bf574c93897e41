import logging
from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = 'WARNING') -> logging.Logger:
    """Configure root logging to go through rich on stderr."""
    root_logger = logging.getLogger()
    numeric_level = getattr(logging, level, None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    root_logger.setLevel(numeric_level)

    # clear handlers left over from a previous call
    root_logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root_logger.addHandler(handler)

    return root_logger
