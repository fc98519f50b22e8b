"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Configuration error.

    Raised at startup; the process must not serve requests with a broken
    configuration.
    """

    pass


class UnsupportedAlgorithmError(ConfigurationError):
    """Signing key algorithm is not supported."""

    def __init__(self, algorithm: str):
        self.algorithm = algorithm
        super().__init__(
            f"Invalid signing key configuration: only ed25519 is currently allowed, got {algorithm!r}"
        )


class SignatureError(UtilError):
    """Key material or signature could not be decoded."""

    pass
