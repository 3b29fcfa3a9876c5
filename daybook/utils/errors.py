"""
Error types
Validation failures are raised before any store call; malformed data raised while deriving views
"""


class DaybookError(Exception):
    """Base class for application errors"""


class RecordValidationError(DaybookError, ValueError):
    """A record is missing required fields or carries out-of-range values"""

    def __init__(self, kind: str, message: str):
        self.kind = kind
        super().__init__(f"{kind}: {message}")


class MalformedDateError(DaybookError, ValueError):
    """A stored date or timestamp string could not be parsed"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"unparseable date: {value!r}")
