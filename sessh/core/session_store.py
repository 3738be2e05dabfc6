# sessh session store
# Persisted history of connection targets, one per line
# Bytes that are not valid UTF-8 round-trip through surrogateescape.

import os
import tempfile
from pathlib import Path
from typing import List, Tuple, Union

from .errors import OutOfRange, ReadFailure, WriteFailure
from .host_list import OrderedHostSet


class SessionStore:
    """
    History of previously used connection targets.

    The file is appended to when a new target is used and rewritten
    as a whole only when an entry is removed.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize the session store.

        Args:
            path: History file, e.g. ~/.session
        """
        self.path = Path(path)

    def load(self) -> List[str]:
        """
        Load stored sessions.

        A missing file is an empty history. Blank lines are skipped and
        repeated entries keep their first position.

        Returns:
            Ordered list of unique session entries
        """
        try:
            text = self.path.read_text(encoding="utf-8", errors="surrogateescape")
        except FileNotFoundError:
            return []
        except OSError as e:
            raise ReadFailure(f"cannot read session history ({e.strerror or e})", str(self.path)) from e

        sessions = OrderedHostSet()
        for line in text.splitlines():
            entry = line.strip()
            if entry:
                sessions.add(entry)
        return sessions.to_list()

    def append(self, entry: str) -> None:
        """
        Append one entry to the history file.

        Args:
            entry: Connection target; empty entries are ignored
        """
        if not entry:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "a", encoding="utf-8", errors="surrogateescape") as f:
                f.write(entry + "\n")
        except OSError as e:
            raise WriteFailure(f"cannot append to session history ({e.strerror or e})", str(self.path)) from e

    def remove(self, entries: List[str], position: int) -> Tuple[str, List[str]]:
        """
        Remove the entry at a 1-based position and rewrite the file.

        The new content is written to a temporary file next to the
        history file and moved into place, so a failed write leaves the
        old history intact.

        Args:
            entries: Session list as returned by load()
            position: 1-based position into entries

        Returns:
            Tuple of (removed entry, remaining entries)

        Raises:
            OutOfRange: if position is not in [1, len(entries)]
            WriteFailure: if the history file cannot be rewritten
        """
        if not 1 <= position <= len(entries):
            raise OutOfRange(position, len(entries), what="session")

        removed = entries[position - 1]
        remaining = entries[:position - 1] + entries[position:]
        self._rewrite(remaining)
        return removed, remaining

    def _rewrite(self, entries: List[str]) -> None:
        """Replace the history file with entries, one per line."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
        except OSError as e:
            raise WriteFailure(f"cannot rewrite session history ({e.strerror or e})", str(self.path)) from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8", errors="surrogateescape") as f:
                for entry in entries:
                    f.write(entry + "\n")
            os.replace(tmp_name, self.path)
        except BaseException as e:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            if isinstance(e, OSError):
                raise WriteFailure(f"cannot rewrite session history ({e.strerror or e})", str(self.path)) from e
            raise
