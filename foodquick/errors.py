# foodquick/errors.py
"""Exceptions raised by Food Quick"""


class FoodQuickError(Exception):
    """Base class for all Food Quick errors"""


class InputFormatError(FoodQuickError, ValueError):
    """A console entry could not be parsed into the expected value"""

    def __init__(self, field: str, value: str, expected: str):
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid input for {field}: {value!r}. Please enter {expected}.")


class RosterError(FoodQuickError):
    """Base class for driver roster problems"""


class RosterFileMissing(RosterError):
    """The roster file does not exist or cannot be read"""

    def __init__(self, path: str, reason: str = 'File not found'):
        self.path = path
        super().__init__(f"{reason}: {path}")


class RosterLineError(RosterError):
    """A roster line is not a valid name,city,load record"""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"Line {line_number}: {reason} ({line!r})")


class InvoiceWriteError(FoodQuickError):
    """The invoice file could not be written"""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(getattr(cause, "strerror", None) or str(cause))
