class PentoError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(PentoError):
    """Requested resource does not exist."""


class ConflictError(PentoError):
    """Operation conflicts with existing state (e.g. book already reviewed)."""


class AuthError(PentoError):
    """Missing, invalid or insufficient credentials."""
