# sessh candidate space
# One numbered index space over session history and known hosts

import sys
from typing import List, Optional, TextIO

from .errors import OutOfRange


def resolve(index: int, sessions: List[str], trusted: List[str]) -> str:
    """
    Resolve a 1-based candidate index.

    Indices 1..len(sessions) address the session history; the trusted
    hosts continue the numbering right after the last session.

    Raises:
        OutOfRange: if index addresses neither list
    """
    offset = len(sessions)
    if 1 <= index <= offset:
        return sessions[index - 1]
    if offset < index <= offset + len(trusted):
        return trusted[index - 1 - offset]
    raise OutOfRange(index, offset + len(trusted))


def printable(entry: str) -> str:
    """Entry as shown on the console; undecodable bytes become U+FFFD."""
    return entry.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def _print_numbered(entries: List[str], start: int, out: TextIO) -> None:
    for number, entry in enumerate(entries, start=start):
        print(f"{number}: {printable(entry)}", file=out)


def display_sessions(sessions: List[str], out: Optional[TextIO] = None) -> None:
    """Print the session history numbered from 1."""
    out = out or sys.stdout
    if not sessions:
        print("  (no stored sessions)", file=out)
        return
    _print_numbered(sessions, 1, out)


def display(sessions: List[str], trusted: List[str], out: Optional[TextIO] = None) -> None:
    """Print sessions, then trusted hosts continuing the same numbering."""
    out = out or sys.stdout
    _print_numbered(sessions, 1, out)
    if trusted:
        if sessions:
            print("-" * 41, file=out)
        _print_numbered(trusted, len(sessions) + 1, out)
