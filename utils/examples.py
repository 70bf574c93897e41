import logging

from utils.errors import UsageError

logger = logging.getLogger(__name__)


def parse_examples(raw_examples):
    """Build the example map from repeated VAR=VALUE arguments."""
    examples = {}

    for raw in raw_examples or []:
        name, sep, value = raw.partition('=')
        if not sep:
            raise UsageError(f"Invalid example '{raw}': expected VAR=VALUE")

        # later values replace earlier ones
        examples[name] = value

    logger.debug("Parsed %d example value(s)", len(examples))
    return examples
