"""Exception hierarchy for the Big-O visualizer."""


class BigOError(Exception):
    """Base exception for all visualizer errors."""
    pass


class ExpressionError(BigOError):
    """An f(n) expression could not be tokenized, parsed or compiled."""

    def __init__(self, message: str, position: int = -1):
        self.position = position
        if position >= 0:
            message = f"{message} (at position {position})"
        super().__init__(message)


class ParameterError(BigOError):
    """A change event referenced a parameter the store does not know."""
    pass
