class PolycalError(Exception):
    """Base error."""

class UnknownCalendarError(PolycalError, KeyError):
    """Raised when a calendar id is not registered."""

    def __str__(self) -> str:
        # KeyError repr()s its argument; keep the message readable
        return str(self.args[0]) if self.args else ""

class InvalidDateError(PolycalError, ValueError):
    """Raised when a (year, month, day) triple does not exist in a calendar."""
