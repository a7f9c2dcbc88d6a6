"""Service-level exceptions."""


class FitnessTrackerError(Exception):
    """Base class for application errors."""


class RecordNotFoundError(FitnessTrackerError):
    """Raised when a record does not exist or is owned by another user."""


class RecordStoreError(FitnessTrackerError, RuntimeError):
    """Raised when the record store fails to complete a write."""


class InvalidRecordError(FitnessTrackerError, ValueError):
    """Raised when record fields fail validation."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__(", ".join(errors))
        self.errors = errors
