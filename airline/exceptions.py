"""Shared exceptions for the airline console."""


class AirlineError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(AirlineError):
    """Malformed user input. Handlers re-prompt or report it and carry on."""


class NotFoundError(AirlineError):
    """A referenced entity (flight instance, plane, reservation...) is absent."""


class StoreError(AirlineError):
    """Driver-level failure: connection loss, constraint violation, timeout."""


class DuplicateKeyError(StoreError):
    pass


class FatalStartupError(AirlineError):
    """The store could not be reached at startup."""
