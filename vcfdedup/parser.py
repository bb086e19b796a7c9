from __future__ import annotations

import logging

from .errors import VCardFormatError
from .models import EntryBuilder, Record
from .utils import BEGIN_LINE, END_LINE, VERSION_PREFIX, is_continuation, split_lines

logger = logging.getLogger(__name__)


class Parser:
    """Recursive-descent parser over the raw lines of a vCard stream.

    A parser is used once: build it from the lines, call :meth:`parse`, drop it.
    The cursor only moves forward.
    """

    def __init__(self, lines: list[str]):
        self.lines = lines
        self.pos = 0
        self.records: list[Record] = []
        self.current: Record | None = None

    @classmethod
    def from_text(cls, text: str) -> "Parser":
        return cls(split_lines(text))

    def parse(self) -> list[Record]:
        while self.pos < len(self.lines):
            self._card()
        return self.records

    def _peek(self) -> str:
        if self.pos >= len(self.lines):
            if self.current is not None:
                raise VCardFormatError(f"unexpected end of input, missing {END_LINE}", self.pos + 1)
            raise VCardFormatError("unexpected end of input", self.pos + 1)
        return self.lines[self.pos]

    def _card(self) -> None:
        self._begin()
        self._version()
        while not self._end():
            self._entry()

    def _begin(self) -> None:
        line = self._peek()
        if line != BEGIN_LINE:
            raise VCardFormatError(f"expected {BEGIN_LINE}, got {line!r}", self.pos + 1)
        logger.debug("New card at line %d", self.pos + 1)
        self.current = Record(version="")
        self.pos += 1

    def _version(self) -> None:
        line = self._peek()
        if not line.startswith(VERSION_PREFIX):
            raise VCardFormatError(f"expected {VERSION_PREFIX} line, got {line!r}", self.pos + 1)
        self._record().version = line
        self.pos += 1

    def _end(self) -> bool:
        line = self._peek()
        if line == BEGIN_LINE:
            raise VCardFormatError(f"{BEGIN_LINE} before {END_LINE}", self.pos + 1)
        if line != END_LINE:
            return False
        self.records.append(self._record())
        self.current = None
        self.pos += 1
        return True

    def _entry(self) -> None:
        builder = EntryBuilder()
        builder.push(self.lines[self.pos])
        self.pos += 1
        while self.pos < len(self.lines) and is_continuation(self.lines[self.pos]):
            builder.push(self.lines[self.pos])
            self.pos += 1
        self._record().insert(builder.build())

    def _record(self) -> Record:
        if self.current is None:
            raise RuntimeError("no open card")
        return self.current


def parse_records(text: str) -> list[Record]:
    """Parse vCard text into records, in file order.

    Raises :class:`VCardFormatError` on the first malformed card; nothing is
    returned for the cards before it.
    """
    return Parser.from_text(text).parse()


__all__ = ["Parser", "parse_records"]
