"""Single-line text form of a file specification exchanged between copy nodes.

A specification line holds, separated by blanks::

    <seqno> <otype> <fileid> <mode> <size> <atime> <mtime> <group> <filename>

The mode is octal and the two times are hexadecimal. Blanks inside the
file name are sent as the 0x1a character. The object type is then sent in
upper case, which tells the receiver to turn them back into blanks. Blanks
inside the group name are always sent as 0x1a.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .fileinfo import FileInfo

__all__ = ["SpecDecodeError", "SpecRecord", "encode_spec", "decode_spec"]

SPACE_ALT = "\x1a"
_LOWER_BIT = 0x20
_UPPER_MASK = 0xDF
_WHITESPACE = " \t\n\v\f\r"
_GROUP_ENCODE_MAX = 63
_GROUP_DECODE_MAX = 31
_NAME_DECODE_MAX = 1025
_U64 = 1 << 64
_I64_LIMIT = 1 << 63

_INT_PATTERNS = {
    "d": re.compile(r"[+-]?[0-9]+"),
    "o": re.compile(r"[+-]?[0-7]+"),
    "x": re.compile(r"[+-]?(?:0[xX])?[0-9a-fA-F]+"),
}
_BASES = {"d": 10, "o": 8, "x": 16}

# Conversion for each of the nine items in order.
_FIELDS = ("d", "c", "d", "o", "d", "x", "x", "s", "s")


class SpecDecodeError(ValueError):
    """A specification line could not be decoded."""

    def __init__(self, item: int, source: str) -> None:
        super().__init__(
            f"Unable to decode item {item} in file specification from {source}"
        )
        self.item = item
        self.source = source


@dataclass
class SpecRecord:
    """A file specification as carried on one line."""

    seqno: int = 0
    filename: str = ""
    info: FileInfo = field(default_factory=FileInfo)


def _hex(value: int) -> str:
    return format(value % _U64 if value < 0 else value, "x")


def _signed(value: int) -> int:
    value %= _U64
    return value - _U64 if value >= _I64_LIMIT else value


def encode_spec(record: SpecRecord) -> str:
    """Return the line, ending in a newline, that describes record."""
    info = record.info
    otype = info.otype
    name = record.filename
    if " " in name:
        name = name.replace(" ", SPACE_ALT)
        otype = chr(ord(otype) & _UPPER_MASK)

    group = "(null)" if info.group is None else info.group
    if " " in group:
        group = group[:_GROUP_ENCODE_MAX].replace(" ", SPACE_ALT)

    return (
        f"{record.seqno} {otype} {info.fileid} {info.mode:o} {info.size} "
        f"{_hex(info.atime)} {_hex(info.mtime)} {group} {name}\n"
    )


def _scan(line: str) -> tuple[int, list]:
    """Scan the nine items; return the count converted (-1 on empty input) and values."""
    values: list = []
    pos = 0
    for kind in _FIELDS:
        while pos < len(line) and line[pos] in _WHITESPACE:
            pos += 1
        if pos >= len(line):
            return (len(values) if values else -1), values
        if kind == "c":
            values.append(line[pos])
            pos += 1
            continue
        if kind == "s":
            limit = _GROUP_DECODE_MAX if len(values) == 7 else _NAME_DECODE_MAX
            end = pos
            while end < len(line) and end - pos < limit and line[end] not in _WHITESPACE:
                end += 1
            values.append(line[pos:end])
            pos = end
            continue
        match = _INT_PATTERNS[kind].match(line, pos)
        if match is None:
            return len(values), values
        values.append(int(match.group(), _BASES[kind]))
        pos = match.end()
    return len(values), values


def decode_spec(line: str, source: str | None = None) -> SpecRecord:
    """Decode a specification line; raises SpecDecodeError naming the bad item."""
    count, values = _scan(line)
    if count != len(_FIELDS):
        raise SpecDecodeError(count + 1, source if source is not None else "?")

    seqno, otype, fileid, mode, size, atime, mtime, group, name = values
    group = group.replace(SPACE_ALT, " ")
    if not ord(otype) & _LOWER_BIT:
        name = name.replace(SPACE_ALT, " ")
        otype = chr(ord(otype) | _LOWER_BIT)

    info = FileInfo(
        fileid=fileid,
        size=size,
        mode=mode,
        atime=_signed(atime),
        mtime=_signed(mtime),
        group=group,
        otype=otype,
    )
    return SpecRecord(seqno=seqno, filename=name, info=info)