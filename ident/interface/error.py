"""Interface layer errors."""

from ident.domain.error import DomainError


class InterfaceError(DomainError):
    """Base interface error."""

    pass


class MissingBodyError(InterfaceError):
    """Request came without a body."""

    errcode = "M_MISSING_PARAMS"

    def __init__(self) -> None:
        super().__init__("Missing request body")


class NotJSONError(InterfaceError):
    """Request body is not valid JSON."""

    errcode = "M_NOT_JSON"

    def __init__(self) -> None:
        super().__init__("Request body is not valid JSON")
