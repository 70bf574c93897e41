class EnvSyncError(Exception):
    """Base error for anything that stops a sample file from being written."""

    pass


class InputError(EnvSyncError):
    """Raised when the source .env file cannot be read."""

    pass


class OutputError(EnvSyncError):
    """Raised when the sample file cannot be created or written."""

    pass


class UsageError(EnvSyncError):
    """Raised for bad command-line input.

    Covers --example values without a '=' separator and source paths
    that have no file name to derive a sample name from.
    """

    pass
