class NetworkError(Exception):
    """Base class for every error raised by scratchnet."""


class ConfigurationError(NetworkError, ValueError):
    """Malformed topology, unknown activator or invalid option."""


class ShapeMismatchError(NetworkError, ValueError):
    """Two vectors that must line up element by element do not."""

    def __init__(self, expected, actual, what="vector"):
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} length mismatch: expected {expected}, got {actual}")
