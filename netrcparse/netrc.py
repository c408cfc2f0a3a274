"""Data model and parser for .netrc files.

Format::

    machine <host> login <user> password <pass> [account <acct>] [port <n>]
    default login <user> password <pass>
    macdef <name>
    <raw lines ...>
    <blank line>

Entries are whitespace-delimited and may span lines. Field keywords apply to
the most recent ``machine`` or ``default`` entry.
"""

import enum
import io
import logging
import re
from dataclasses import dataclass, field
from os import PathLike
from typing import IO

from .errors import ParseError
from .lexer import Lexer

logger = logging.getLogger(__name__)

MAX_PORT = 65535

_PORT_RE = re.compile(r"\+?[0-9]+")


@dataclass
class Machine:
    """Credentials of one machine (or default) entry."""
    login: str = ""
    password: str | None = field(default=None, repr=False)
    account: str | None = None
    port: int | None = None


@dataclass
class Host:
    """A ``machine`` entry: host name plus its record."""
    name: str
    machine: Machine


@dataclass
class Macro:
    """A ``macdef`` block. The body is raw text, blank terminator included."""
    name: str
    body: str


class Target(enum.Enum):
    """Which record field keywords currently write to.

    A host is referenced by its index (a plain ``int``) instead of a member.
    """
    NOTHING = "nothing"
    DEFAULT = "default"


def _parse_port(value: str) -> int | None:
    if not _PORT_RE.fullmatch(value):
        return None
    port = int(value)
    if port > MAX_PORT:
        return None
    return port


@dataclass
class Netrc:
    """Parsed contents of a .netrc file."""
    hosts: list[Host] = field(default_factory=list)
    default: Machine | None = None
    macros: list[Macro] = field(default_factory=list)

    @classmethod
    def parse(cls, source: IO, source_file: str | None = None) -> "Netrc":
        """Parse a netrc document from a readable text or binary stream.

        Raises:
            ParseError: on the first syntax error, with its line number
            ReadError: if reading from ``source`` fails
        """
        netrc = cls()
        lexer = Lexer(source, source_file)
        target: Target | int = Target.NOTHING
        while (word := lexer.next_word()) is not None:
            target = netrc._parse_entry(lexer, word, target)
        logger.debug(
            "Parsed %d hosts, %d macros (default: %s)",
            len(netrc.hosts),
            len(netrc.macros),
            "yes" if netrc.default is not None else "no",
        )
        return netrc

    @classmethod
    def from_string(cls, text: str) -> "Netrc":
        return cls.parse(io.StringIO(text))

    @classmethod
    def from_file(cls, path: str | PathLike) -> "Netrc":
        """Open ``path`` and parse it. Errors carry the file name."""
        with open(path, "rb") as f:
            return cls.parse(f, source_file=str(path))

    def _parse_entry(self, lexer: Lexer, word: str, target: Target | int) -> Target | int:
        lineno = lexer.lineno

        if word == "machine":
            name = lexer.expect_word()
            self.hosts.append(Host(name, Machine()))
            logger.debug("line %d: machine %s", lineno, name)
            return len(self.hosts) - 1

        if word == "default":
            self.default = Machine()
            logger.debug("line %d: default", lineno)
            return Target.DEFAULT

        if word == "macdef":
            name = lexer.expect_word()
            body = lexer.read_macro_body()
            self.macros.append(Macro(name, body))
            logger.debug("line %d: macdef %s", lineno, name)
            return Target.NOTHING

        if word in ("login", "password", "account", "port"):
            machine = self._resolve(target)
            if machine is None:
                raise ParseError(
                    f"No machine defined for {word}", lineno, lexer.source_file
                )
            value = lexer.expect_word()
            if word == "login":
                machine.login = value
            elif word == "password":
                machine.password = value
            elif word == "account":
                machine.account = value
            else:
                port = _parse_port(value)
                if port is None:
                    raise ParseError(
                        f"Unable to parse port number `{value}'",
                        lineno,
                        lexer.source_file,
                    )
                machine.port = port
            return target

        raise ParseError(f"Unknown entry `{word}'", lineno, lexer.source_file)

    def _resolve(self, target: Target | int) -> Machine | None:
        if target is Target.NOTHING:
            return None
        if target is Target.DEFAULT:
            return self.default
        return self.hosts[target].machine

    def find(self, hostname: str) -> Machine | None:
        """Return the first record for ``hostname``, falling back to default."""
        for host in self.hosts:
            if host.name == hostname:
                return host.machine
        return self.default

    def machines_for(self, hostname: str) -> list[Machine]:
        return [host.machine for host in self.hosts if host.name == hostname]

    def find_macro(self, name: str) -> Macro | None:
        for macro in self.macros:
            if macro.name == name:
                return macro
        return None
