"""Input helpers: CSV lines, string splitting and terminal control."""

from __future__ import annotations

import re
import shutil
import subprocess
import sys
from typing import TextIO

MAX_LINE_LENGTH = 4096
MAX_FIELDS = 128

_CLEAR_SEQUENCE = "\033[H\033[2J"


def read_csv_line(stream: TextIO, separator: str = ",") -> list[str] | None:
    """Read one line from ``stream`` and split it into fields.

    Fields may be wrapped in double quotes, which lets them hold the
    separator; a doubled quote inside stands for one quote. At most
    ``MAX_LINE_LENGTH - 1`` characters are read per call and at most
    ``MAX_FIELDS - 1`` fields are returned. Returns None at end of file.
    """
    raw = stream.readline(MAX_LINE_LENGTH - 1)
    if raw == "":
        return None
    line = re.split(r"[\r\n]", raw, maxsplit=1)[0]

    fields: list[str] = []
    pos = 0
    length = len(line)
    while pos < length and len(fields) < MAX_FIELDS - 1:
        if line[pos] == '"':
            pos += 1
            chars: list[str] = []
            while pos < length:
                ch = line[pos]
                if ch == '"' and line.startswith('"', pos + 1):
                    chars.append('"')
                    pos += 2
                elif ch == '"':
                    pos += 1
                    break
                else:
                    chars.append(ch)
                    pos += 1
            if line.startswith(separator, pos):
                pos += 1
            fields.append("".join(chars))
        else:
            end = line.find(separator, pos)
            if end == -1:
                fields.append(line[pos:])
                pos = length
            else:
                fields.append(line[pos:end])
                pos = end + 1
    return fields


def split_string(text: str, delim: str) -> list[str]:
    """Split ``text`` on any character of ``delim``.

    Empty pieces are dropped and spaces around each piece are trimmed.
    """
    if not delim:
        pieces = [text] if text else []
    else:
        pattern = "[" + "".join(re.escape(ch) for ch in delim) + "]+"
        pieces = [piece for piece in re.split(pattern, text) if piece]
    return [piece.strip(" ") for piece in pieces]


def clear_screen() -> None:
    """Clear the terminal."""
    if shutil.which("clear"):
        subprocess.run(["clear"], check=False)
    else:
        sys.stdout.write(_CLEAR_SEQUENCE)
        sys.stdout.flush()


def wait_for_key(stream: TextIO | None = None) -> None:
    """Prompt and wait for a key, first consuming the pending newline."""
    source = sys.stdin if stream is None else stream
    print("Presione una tecla para continuar...")
    source.read(1)
    source.read(1)