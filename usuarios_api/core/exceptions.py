"""Domain errors raised by handlers and rendered as plain-text responses."""

USER_NOT_FOUND_MESSAGE: str = "El usuario no se encuentra."


class UsuariosError(Exception):
    """Base class for errors that map to an HTTP status."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UserNotFoundError(UsuariosError):
    """No record matches the requested id."""

    status_code = 404

    def __init__(self, message: str = USER_NOT_FOUND_MESSAGE) -> None:
        super().__init__(message)


class UserValidationError(UsuariosError):
    """Payload failed validation; carries the first violation message."""

    status_code = 400


class MalformedBodyError(UsuariosError):
    """Request body could not be decoded."""

    status_code = 400
