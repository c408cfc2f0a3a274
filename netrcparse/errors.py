"""Exceptions raised while reading .netrc files."""


class NetrcError(Exception):
    """Base exception for all netrcparse errors."""


def _location(lineno: int | None, source_file: str | None) -> str:
    location = ""
    if source_file:
        location = f"{source_file}:"
    if lineno is not None:
        location += f"{lineno}:"
    if location:
        location = location.rstrip(":") + ": "
    return location


class ParseError(NetrcError):
    """Syntax error in a .netrc file.

    Carries the message and the 1-based line number separately so callers
    can check either one.
    """

    def __init__(self, message: str, lineno: int, source_file: str | None = None):
        self.message = message
        self.lineno = lineno
        self.source_file = source_file
        super().__init__(f"{_location(lineno, source_file)}{message}")


class ReadError(NetrcError):
    """The underlying source failed while being read (I/O or decoding)."""

    def __init__(self, message: str, lineno: int, source_file: str | None = None):
        self.message = message
        self.lineno = lineno
        self.source_file = source_file
        super().__init__(f"{_location(lineno, source_file)}{message}")
