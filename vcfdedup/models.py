from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .utils import BEGIN_LINE, END_LINE, is_continuation, property_name


@dataclass(frozen=True)
class Entry:
    """One logical property: a property line plus its folded continuations.

    Lines are kept exactly as read, so two entries are equal only when every
    line matches, folding and whitespace included.
    """

    lines: Tuple[str, ...]

    def __post_init__(self):
        if not self.lines:
            raise ValueError("an entry needs at least one line")
        for line in self.lines[1:]:
            if not is_continuation(line):
                raise ValueError(f"not a continuation line: {line!r}")

    @classmethod
    def of(cls, *lines: str) -> "Entry":
        return cls(tuple(lines))

    @property
    def property_line(self) -> str:
        return self.lines[0]

    @property
    def name(self) -> str:
        return property_name(self.lines[0])

    def startswith(self, prefix: str) -> bool:
        return self.lines[0].startswith(prefix)


class EntryBuilder:
    """Collects the raw lines of an entry while the parser reads them."""

    def __init__(self):
        self._lines: List[str] = []

    def __len__(self) -> int:
        return len(self._lines)

    def push(self, line: str) -> None:
        # Only the first line may be a property line.
        if self._lines and not is_continuation(line):
            raise ValueError(f"continuation line expected, got {line!r}")
        self._lines.append(line)

    def build(self) -> Entry:
        return Entry(tuple(self._lines))


@dataclass
class Record:
    """One vCard: its verbatim VERSION line and a set of unique entries.

    Entries live in a dict used as an insertion-ordered set. Equality ignores
    entry order.
    """

    version: str
    entries: Dict[Entry, None] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __contains__(self, entry: object) -> bool:
        return entry in self.entries

    def insert(self, entry: Entry) -> None:
        self.entries.setdefault(entry, None)

    def extend(self, entries: Iterable[Entry]) -> None:
        for entry in entries:
            self.insert(entry)

    def merge(self, other: "Record") -> None:
        """Union ``other``'s entries into this record. Our version is kept."""
        self.extend(other.entries)

    def get(self, prefix: str) -> Optional[Entry]:
        for entry in self.entries:
            if entry.startswith(prefix):
                return entry
        return None

    def find(self, name: str) -> Optional[Entry]:
        """First entry whose property name is exactly ``name``."""
        wanted = name.upper()
        for entry in self.entries:
            if entry.name == wanted:
                return entry
        return None

    def copy(self) -> "Record":
        return Record(self.version, dict(self.entries))

    def lines(self) -> List[str]:
        out = [BEGIN_LINE, self.version]
        for entry in self.entries:
            out.extend(entry.lines)
        out.append(END_LINE)
        return out
