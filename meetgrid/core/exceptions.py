"""Domain exceptions raised by the service layer.

Endpoints translate these into HTTP responses; nothing here is fatal to the
process, each one is scoped to the request that triggered it.
"""


class MeetgridError(Exception):
    """Base class for application errors."""


class MeetingNotFoundError(MeetgridError):
    """The requested meeting does not exist."""

    def __init__(self, meeting_id: int):
        super().__init__(f"Meeting {meeting_id} not found")
        self.meeting_id = meeting_id


class StoreError(MeetgridError):
    """A read or write against the data store failed.

    The operation that raised it has been aborted and any partial writes
    rolled back.
    """

    def __init__(self, operation: str, message: str = "The data store is unavailable"):
        super().__init__(message)
        self.operation = operation
