class TodoError(Exception):
    pass


class TodoTextEmptyError(TodoError, ValueError):
    pass


class TodoBackendError(TodoError):
    """The remote backend could not be reached or rejected the request."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
