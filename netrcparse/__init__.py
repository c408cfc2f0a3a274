"""Parser for .netrc credential files."""

from .errors import NetrcError, ParseError, ReadError
from .lookup import find_credentials, find_netrc_path, load_netrc
from .netrc import Host, Machine, Macro, Netrc

__all__ = [
    "Host",
    "Machine",
    "Macro",
    "Netrc",
    "NetrcError",
    "ParseError",
    "ReadError",
    "find_credentials",
    "find_netrc_path",
    "load_netrc",
]
