"""Word-level lexing of .netrc input.

Two cooperating pieces: :class:`Tokens` walks a single line, and
:class:`Lexer` feeds it one line at a time from the underlying source,
counting every physical line it reads.
"""

from typing import IO, Iterator

from .errors import ParseError, ReadError

# Lines that end a macro definition.
MACRO_TERMINATORS = ("", "\n", "\r\n")


class Tokens:
    """Whitespace-delimited words of one line, consumed left to right."""

    def __init__(self, line: str):
        self.line = line
        self.pos = 0

    @classmethod
    def empty(cls) -> "Tokens":
        return cls("")

    @property
    def remaining(self) -> str:
        """Text not yet consumed, starting at the cursor."""
        return self.line[self.pos:]

    def next_word(self) -> str | None:
        line = self.line
        end = len(line)
        pos = self.pos
        while pos < end and line[pos].isspace():
            pos += 1
        start = pos
        while pos < end and not line[pos].isspace():
            pos += 1
        self.pos = pos
        if start == pos:
            return None
        return line[start:pos]

    def __iter__(self) -> Iterator[str]:
        while (word := self.next_word()) is not None:
            yield word


class Lexer:
    """Pulls words from a line-buffered source.

    ``source`` needs only a ``readline()`` method; it may return ``str`` or
    UTF-8 encoded ``bytes``. The source is read once, front to back.
    """

    def __init__(self, source: IO, source_file: str | None = None):
        self.source = source
        self.source_file = source_file
        self.tokens = Tokens.empty()
        self.lineno = 0

    def _read_line(self) -> str:
        try:
            line = self.source.readline()
            if isinstance(line, bytes):
                line = line.decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(
                f"Unable to read input: {e}", self.lineno + 1, self.source_file
            ) from e
        if line:
            self.lineno += 1
        return line

    def _refill(self) -> bool:
        line = self._read_line()
        self.tokens = Tokens(line)
        return bool(line)

    def next_word(self) -> str | None:
        """Return the next word, or None once the source is exhausted."""
        while True:
            word = self.tokens.next_word()
            if word is not None:
                return word
            if not self._refill():
                return None

    def expect_word(self) -> str:
        """Like next_word, but running out of input is a ParseError."""
        word = self.next_word()
        if word is None:
            raise ParseError("Unexpected end of file", self.lineno, self.source_file)
        return word

    def read_macro_body(self) -> str:
        """Capture raw text up to and including the next blank line.

        Starts with whatever follows the macro name on the current line.
        """
        parts = [self.tokens.remaining]
        self.tokens = Tokens.empty()
        while True:
            line = self._read_line()
            parts.append(line)
            if line in MACRO_TERMINATORS:
                return "".join(parts)
