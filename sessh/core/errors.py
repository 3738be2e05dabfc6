# sessh errors
# Failures raised while resolving and launching a session

from typing import Optional


class SesshError(Exception):
    """Base class for all sessh errors."""


class ReadFailure(SesshError):
    """A host source or the session history could not be read."""
    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        if path:
            message = f"{message}: {path}"
        super().__init__(message)


class ConfigurationError(ReadFailure):
    """The environment or config file does not allow resolving paths."""


class ParseFailure(SesshError):
    """Numeric-looking input that could not be parsed as an integer."""
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"not a valid number: {text!r}")


class OutOfRange(SesshError):
    """Index outside the candidate space or the session list."""
    def __init__(self, index: int, upper: int, what: str = "index"):
        self.index = index
        self.upper = upper
        if upper > 0:
            valid = f"expected 1-{upper}"
        else:
            valid = "nothing to choose from"
        super().__init__(f"{what} out of range: {index} ({valid})")


class Abort(SesshError):
    """The user asked to leave without connecting."""
    def __init__(self, reason: str = "aborted"):
        self.reason = reason
        super().__init__(reason)


class LaunchError(SesshError):
    """The ssh program could not be started."""


class WriteFailure(SesshError):
    """The session history could not be written."""
    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        if path:
            message = f"{message}: {path}"
        super().__init__(message)
