"""
Error types raised by the service layer and at startup.

Every failure of a meetup operation is one of the subclasses of
``MeetupServiceError``.  The failure kinds wrap the underlying
``sqlite3`` error (available as ``__cause__`` and ``reason``) so the
API layer can include its text in the response message.
"""


class ConfigurationError(RuntimeError):
    """Required configuration is missing or malformed."""


class MeetupServiceError(Exception):
    """Base class for meetup operation failures."""

    #: Prefix used when the error is rendered for a client.
    action = "Failed to process meetup"

    def __init__(self, reason: str = ""):
        self.reason = reason
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return f"{self.action}: {self.reason}"


class MeetupNotFound(MeetupServiceError):
    """The requested meetup does not exist."""

    def __init__(self, meetup_id: int):
        self.meetup_id = meetup_id
        super().__init__(reason="not found")

    @property
    def message(self) -> str:
        return f"Meetup with id {self.meetup_id} not found"


class RetrievalFailure(MeetupServiceError):
    """Reading one or more meetups failed."""

    action = "Failed to fetch meetup"

    def __init__(self, reason: str = "", many: bool = False):
        if many:
            self.action = "Failed to fetch meetups"
        super().__init__(reason)


class CreationFailure(MeetupServiceError):
    action = "Failed to create meetup"


class UpdateFailure(MeetupServiceError):
    action = "Failed to update meetup"


class DeletionFailure(MeetupServiceError):
    action = "Failed to delete meetup"
