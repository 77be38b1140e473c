"""Recorder errors."""


class RecorderError(Exception):
    """Base class for all errors raised by a recording session."""

    pass


class InvalidSchema(RecorderError):
    """The row schema cannot be built from the given parameters."""

    pass


class AlreadyRecording(RecorderError):
    """A session cannot be opened while another one is recording."""

    def __init__(self, destination_name: str):
        """Initialize the exception.

        Args:
            destination_name: Name of the file the active session is recording to.
        """
        self.destination_name = destination_name
        self.message = f"Already recording data in {destination_name}."
        super().__init__(self.message)


class NotRecording(RecorderError):
    """The operation is only valid while a session is recording."""

    def __init__(self, operation: str):
        """Initialize the exception.

        Args:
            operation: Name of the rejected operation.
        """
        self.operation = operation
        self.message = f"Cannot {operation}: no session is recording."
        super().__init__(self.message)


class SchemaMismatch(RecorderError):
    """The shape of the appended data does not match the bound schema."""

    pass
