"""Domain layer errors.

Every client-facing error carries a Matrix error code and an HTTP status so
the interface layer can render it without knowing the concrete type.
"""


class DomainError(Exception):
    """Base domain error."""

    errcode: str = "M_UNKNOWN"
    http_status: int = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingParamError(DomainError):
    """A required request field is absent or empty."""

    errcode = "M_MISSING_PARAMS"

    def __init__(self, param: str):
        self.param = param
        super().__init__(f"Missing params: {param}")


class InvalidParamError(DomainError):
    """A request field is present but malformed."""

    errcode = "M_INVALID_PARAM"


class InvalidEmailError(InvalidParamError):
    """The email address does not have exactly one '@' with both parts set."""

    errcode = "M_INVALID_EMAIL"

    def __init__(self, address: str | None = None):
        self.address = address
        super().__init__("Invalid email address")


class UnsupportedMediumError(InvalidParamError):
    """The 3PID medium is not one this service handles."""

    def __init__(self, medium: str):
        self.medium = medium
        super().__init__(f"Unsupported medium: {medium}")


class UnrecognizedTokenError(DomainError):
    """The invite token does not resolve to a stored invite."""

    errcode = "M_UNRECOGNIZED"
    http_status = 404

    def __init__(self) -> None:
        super().__init__("Unrecognised token")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    errcode = "M_NOT_FOUND"
    http_status = 404

    def __init__(self, resource: str, identifier: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"The {resource} was not found")


class StorageError(DomainError):
    """Storage backend failed. Detail is for operators only."""

    http_status = 500


class DuplicateError(StorageError):
    """A uniqueness constraint rejected an insert."""

    pass


class DuplicateTokenError(DuplicateError):
    """An invite with the same token already exists."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invite token already exists: {token[:8]}...")


class DuplicateKeyError(DuplicateError):
    """The ephemeral public key was already recorded."""

    def __init__(self, public_key: str):
        self.public_key = public_key
        super().__init__(f"Ephemeral public key already recorded: {public_key}")
