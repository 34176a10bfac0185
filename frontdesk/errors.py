"""Domain errors raised by the front-desk registries.

The API layer maps each class to an HTTP status in ``frontdesk.main``:

* ``ValidationError``   -> 422
* ``InvalidTransition`` -> 409
* ``NotFoundError``     -> 404
"""


class FrontDeskError(Exception):
    """Base class for all front-desk domain errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(FrontDeskError):
    """A required field is missing or a value is outside its allowed range."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidTransition(FrontDeskError):
    """The operation is not permitted in the record's current state."""

    def __init__(self, message: str, current: str, requested: str) -> None:
        super().__init__(message)
        self.current = current
        self.requested = requested


class NotFoundError(FrontDeskError):
    """No room or reservation exists under the given key."""
