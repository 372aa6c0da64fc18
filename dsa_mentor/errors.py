"""Error kinds raised by the assistance pipeline."""


class AssistanceError(Exception):
    """Base class; ``status_code`` is the HTTP status used when surfaced."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AssistanceError):
    """Missing or unsupported language, or an unusable problem index."""

    status_code = 400


class ProblemNotFound(ValidationError):
    status_code = 404


class CatalogLoadError(AssistanceError):
    """The problem catalog could not be read or is empty."""


class InferenceUnavailable(AssistanceError):
    """Connection refused, timeout, bad status or a malformed stream.

    Never shown to clients; the service answers with a fallback instead.
    """

    status_code = 503


class PersistenceError(AssistanceError):
    """Reading or writing the response store failed."""
