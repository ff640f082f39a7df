"""Domain errors raised by the service layer and translated by the routes."""


class CinemaError(Exception):
    pass


class NotFoundError(CinemaError):
    """Requested entity is absent by identifier or unique key."""


class InvalidArgumentError(CinemaError):
    """A business rule rejected the input (duplicate unique field, bad password, bad seat)."""


class SeatTakenError(InvalidArgumentError):
    """The (show, row, cell) triple already belongs to another ticket."""


class StorageError(CinemaError):
    """The store failed for a reason the caller cannot fix (connection or unknown)."""

    def __init__(self, message, failure=None):
        super().__init__(message)
        self.failure = failure
