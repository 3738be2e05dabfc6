# sessh input interpreter
# Turns what the user typed into a launch target or a history change

import re
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, TextIO, Tuple

from . import candidates
from .errors import Abort, ParseFailure
from .event_log import NullLogger
from .session_store import SessionStore

NUMBER = re.compile(r"^-?[0-9]+$")

# Input kinds
EMPTY = "empty"
NUMBER_INPUT = "number"
TARGET = "target"

# Resolution actions
LAUNCH = "launch"
DELETE = "delete"


@dataclass
class Resolution:
    """Final outcome of one interpreted input."""
    action: str  # launch, delete
    entry: str
    index: Optional[int] = None

    @property
    def target(self) -> Optional[str]:
        """Entry to hand to the launcher, None for deletions."""
        return self.entry if self.action == LAUNCH else None


def classify(line: str) -> Tuple[str, str]:
    """
    Classify one line of input.

    Returns:
        Tuple of (kind, trimmed text); kind is one of
        "empty", "number" or "target"
    """
    text = line.strip()
    if not text:
        return EMPTY, text
    if NUMBER.match(text):
        return NUMBER_INPUT, text
    return TARGET, text


def strip_ssh_prefix(target: str) -> str:
    """Drop a leading "ssh" word typed out of habit before the target."""
    parts = target.strip().split(None, 1)
    if parts and parts[0] == "ssh":
        return parts[1].strip() if len(parts) > 1 else ""
    return target.strip()


def parse_index(text: str) -> int:
    """Parse a signed decimal index, raising ParseFailure on bad text."""
    try:
        return int(text)
    except ValueError as e:
        raise ParseFailure(text) from e


def read_stdin_line() -> Optional[str]:
    """Read one line from stdin; None on EOF or Ctrl-C."""
    try:
        return input()
    except (EOFError, KeyboardInterrupt):
        return None


class InputInterpreter:
    """
    Resolve user input against the session history and known hosts.

    Input rules:
        (blank)     list sessions followed by known hosts, then ask again
        N           connect to candidate N
        -N          remove session N from the history
        0           leave without connecting
        user@host   connect to a new target, remembering it
    """

    def __init__(
        self,
        store: SessionStore,
        load_trusted: Callable[[], List[str]],
        read_line: Optional[Callable[[], Optional[str]]] = None,
        out: Optional[TextIO] = None,
        logger=None,
    ):
        """
        Initialize the interpreter.

        Args:
            store: Session history store
            load_trusted: Loader for the known hosts list, only called
                when the user asks for the full listing
            read_line: Line reader, defaults to stdin
            out: Stream for listings, defaults to stdout
            logger: Event logger
        """
        self.store = store
        self.load_trusted = load_trusted
        self.read_line = read_line or read_stdin_line
        self.out = out or sys.stdout
        self.logger = logger or NullLogger()

    def _next_line(self) -> str:
        line = self.read_line()
        if line is None:
            raise Abort("no input")
        return line

    def run(self, sessions: Optional[List[str]] = None) -> Resolution:
        """
        Read input and resolve it.

        Args:
            sessions: Already loaded session list, loaded from the store
                when omitted

        Returns:
            Resolution for a launch or a deletion

        Raises:
            Abort: on 0, end of input or an empty selection
            OutOfRange: if an index addresses nothing
            ParseFailure: if numeric input cannot be parsed
        """
        if sessions is None:
            sessions = self.store.load()

        trusted: List[str] = []
        kind, text = classify(self._next_line())
        if kind == EMPTY:
            trusted = self.load_trusted()
            candidates.display(sessions, trusted, self.out)
            kind, text = classify(self._next_line())

        return self.interpret(kind, text, sessions, trusted)

    def interpret(
        self,
        kind: str,
        text: str,
        sessions: List[str],
        trusted: List[str],
    ) -> Resolution:
        """Resolve one classified input against the loaded lists."""
        if kind == EMPTY:
            raise Abort("nothing selected")

        if kind == NUMBER_INPUT:
            index = parse_index(text)
            if index == 0:
                raise Abort("zero selected")
            if index < 0:
                removed, _ = self.store.remove(sessions, -index)
                self.logger.write("session_removed", entry=removed, position=-index)
                return Resolution(action=DELETE, entry=removed, index=index)
            entry = candidates.resolve(index, sessions, trusted)
            self.logger.write("resolved", entry=entry, index=index)
            return Resolution(action=LAUNCH, entry=entry, index=index)

        text = strip_ssh_prefix(text)
        if not text:
            raise Abort("nothing selected")
        if text not in sessions:
            self.store.append(text)
            sessions.append(text)
            self.logger.write("session_added", entry=text)
        return Resolution(action=LAUNCH, entry=text)
