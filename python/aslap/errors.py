class AslapError(Exception):
    """Base class for everything aslap raises on its own."""


class ConfigError(AslapError, ValueError):
    """
    Startup parameters that can never produce a valid run: a bit width outside
    [0, 7] or a duration string that does not parse.
    """


class ShortWriteError(AslapError, OSError):
    """The output accepted fewer bytes than one whole character."""

    def __init__(self, written: int, expected: int):
        super().__init__(f"short write: {written} of {expected} bytes")
        self.written = written
        self.expected = expected
