"""Error types shared by the API and the migration job."""


class StoreError(Exception):
    """A store rejected a query or an upsert.

    `details` carries any structured detail the driver reported alongside
    the message (constraint name, offending row, ...).
    """

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ConfigurationError(Exception):
    """Required connection or credential configuration is missing."""
