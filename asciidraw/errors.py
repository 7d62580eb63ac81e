# errors.py

class DrawError(Exception):
    """
    Base class for every user-facing interpreter error.

    These errors are recoverable: the dispatcher reports them as a single
    `error: <message>` line and the session keeps accepting commands.
    """
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AlreadyInitialized(DrawError):
    def __init__(self):
        super().__init__("Grid has already been initialized")


class NotInitialized(DrawError):
    def __init__(self):
        super().__init__("Grid isn't initialized")


class InvalidDimensions(DrawError):
    pass


class UnrecognizedCommand(DrawError):
    def __init__(self, name: str):
        super().__init__(f"Invalid command `{name}`")
        self.name = name


class InvalidArguments(DrawError):
    pass
