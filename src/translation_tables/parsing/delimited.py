"""Field splitting for the delimited (CSV-like) translation format.

The first line of a file looks like ``Context;Reference;en;fr``. The character
right after ``Context`` is the field separator; any other header means comma.
Fields can be wrapped in double quotes, in which case the separator is literal
and a doubled quote stands for one quote character.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import List

DEFAULT_SEPARATOR = ","
HEADER_MARKER = "Context"
QUOTE = '"'


class _State(Enum):
    FIELD_START = auto()
    UNQUOTED = auto()
    QUOTED = auto()
    QUOTE_ESCAPE = auto()
    CLOSED = auto()


def detect_separator(header_line: str) -> str:
    """Return the separator announced by a header line.

    ``Context;Reference;en`` gives ``;``. A header that does not start with
    ``Context`` (or is exactly ``Context``) gives a comma.
    """
    marker_len = len(HEADER_MARKER)
    if header_line.startswith(HEADER_MARKER) and len(header_line) > marker_len:
        return header_line[marker_len]
    return DEFAULT_SEPARATOR


def split_fields(line: str, separator: str = DEFAULT_SEPARATOR) -> List[str]:
    """Split one line into decoded field values.

    A quoted field holding the separator and doubled quotes comes back as one
    plain value. An empty line is one empty field. Text between a closing
    quote and the next separator is dropped. A quote that is never closed
    does not start a quoted field: the text is split at the next separator
    and keeps its leading quote.
    """
    fields: List[str] = []
    buf: List[str] = []
    state = _State.FIELD_START
    field_start = 0

    for pos, char in enumerate(line):
        if state is _State.FIELD_START:
            field_start = pos
            if char == QUOTE:
                state = _State.QUOTED
            elif char == separator:
                fields.append("")
            else:
                buf.append(char)
                state = _State.UNQUOTED
        elif state is _State.UNQUOTED:
            if char == separator:
                fields.append("".join(buf))
                buf.clear()
                state = _State.FIELD_START
            else:
                buf.append(char)
        elif state is _State.QUOTED:
            if char == QUOTE:
                state = _State.QUOTE_ESCAPE
            else:
                buf.append(char)
        elif state is _State.QUOTE_ESCAPE:
            if char == QUOTE:
                buf.append(QUOTE)
                state = _State.QUOTED
            elif char == separator:
                fields.append("".join(buf))
                buf.clear()
                state = _State.FIELD_START
            else:
                state = _State.CLOSED
        elif char == separator:  # CLOSED
            fields.append("".join(buf))
            buf.clear()
            state = _State.FIELD_START

    if state is _State.QUOTED:
        head, found, rest = line[field_start:].partition(separator)
        fields.append(head)
        if found:
            fields.extend(split_fields(rest, separator))
        return fields

    fields.append("".join(buf))
    return fields


def from_csv(value: str) -> str:
    """Undo CSV quoting on a single cell value.

    A value wrapped in double quotes loses them and each doubled quote
    inside becomes one. Anything else is returned unchanged.
    """
    if len(value) >= 2 and value.startswith(QUOTE) and value.endswith(QUOTE):
        return value[1:-1].replace(QUOTE * 2, QUOTE)
    return value
