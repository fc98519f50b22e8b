"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class NotifierError(AdapterError):
    """Invite notification could not be delivered."""

    pass
