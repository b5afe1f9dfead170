class FitnessError(Exception):
    """Base class for errors raised by the tracker core."""


class ValidationError(FitnessError, ValueError):
    """Raised for malformed or out-of-range input."""


class NotFoundError(FitnessError, LookupError):
    """Raised when a referenced record does not exist."""


class PersistenceError(FitnessError, RuntimeError):
    """Raised when a durable store write or read fails."""
