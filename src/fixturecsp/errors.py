"""Exceptions for the fixture scheduler.

- FixtureError: base for everything raised by this package
- MalformedRecord: a roster or fixture record cannot be parsed
- SinkWriteFailure: the fixture list cannot be written out
- ConfigError: missing or invalid configuration
"""


class FixtureError(Exception):
    """Base exception for all fixture scheduler errors."""
    pass


class MalformedRecord(FixtureError):
    """A record has a missing field or an unparseable value."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class SinkWriteFailure(FixtureError):
    """The fixture sink could not persist its output."""
    pass


class ConfigError(FixtureError):
    """Missing or invalid configuration."""
    pass
