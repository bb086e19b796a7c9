from __future__ import annotations

CRLF = "\r\n"
LF = "\n"

BEGIN_LINE = "BEGIN:VCARD"
END_LINE = "END:VCARD"
VERSION_PREFIX = "VERSION:"
NAME_PROPERTY = "N"

_FOLD_CHARS = (" ", "\t")


def split_lines(text: str) -> list[str]:
    """Split vCard text into raw lines.

    Only LF separates lines; one trailing CR per line is dropped so CRLF input
    reads the same as LF input. A final terminator does not produce an extra
    empty line, and empty text has no lines at all.
    """
    if not text:
        return []
    lines = text.split(LF)
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def is_continuation(line: str) -> bool:
    return line.startswith(_FOLD_CHARS)


def property_name(line: str) -> str:
    """Return the upper-cased property name of a property line.

    The name ends at the first parameter separator or value separator:
    ``TEL;TYPE=CELL:123`` -> ``TEL``.
    """
    end = len(line)
    for sep in (";", ":"):
        idx = line.find(sep)
        if idx != -1 and idx < end:
            end = idx
    return line[:end].strip().upper()


__all__ = [
    "CRLF",
    "LF",
    "BEGIN_LINE",
    "END_LINE",
    "VERSION_PREFIX",
    "NAME_PROPERTY",
    "split_lines",
    "is_continuation",
    "property_name",
]
