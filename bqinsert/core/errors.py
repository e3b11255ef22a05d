"""BQInsert — Error Types."""


class BQError(Exception):
    """Base error for everything raised by bqinsert."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SerializationError(BQError, ValueError):
    """Raised when a row payload or a request cannot be represented as JSON."""


class CompressionError(BQError, OSError):
    """Raised when the gzip stream cannot be written or finalized."""


class FeatureDisabledError(BQError):
    """Raised when an optional capability is switched off in settings."""

    def __init__(self, feature: str):
        self.feature = feature
        super().__init__(f"'{feature}' support is disabled (BQINSERT_{feature.upper()}_ENABLED)")
