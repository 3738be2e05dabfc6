# sessh host lists
# Line-oriented host sources (known_hosts, session history)

from pathlib import Path
from typing import Dict, List, Union

from .errors import ReadFailure


class OrderedHostSet:
    """
    Insertion-ordered set of host entries.

    Backed by a dict so that membership tests and first-seen ordering
    come from the same structure.
    """

    def __init__(self):
        self._entries: Dict[str, None] = {}

    def add(self, entry: str) -> bool:
        """Add an entry. Returns False if it was already present."""
        if entry in self._entries:
            return False
        self._entries[entry] = None
        return True

    def to_list(self) -> List[str]:
        return list(self._entries)


def first_token(line: str) -> str:
    """Entry of a host line: the trimmed line up to the first space."""
    return line.strip().split(" ", 1)[0]


def parse_host_lines(text: str) -> List[str]:
    """
    Parse line-oriented host text into unique entries.

    Blank lines are skipped. Each remaining line contributes the text
    before its first space, so a known_hosts line such as
    ``host1,10.0.0.1 ssh-ed25519 AAAA...`` yields ``host1,10.0.0.1``.
    Order of first appearance is kept.

    Args:
        text: Raw file content

    Returns:
        Ordered list of unique host entries
    """
    hosts = OrderedHostSet()
    for line in text.splitlines():
        if not line.strip():
            continue
        hosts.add(first_token(line))
    return hosts.to_list()


def read_host_list(path: Union[str, Path]) -> List[str]:
    """
    Read and parse a host file.

    Raises:
        ReadFailure: if the file is missing or cannot be read
    """
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ReadFailure(f"cannot read host list ({e.strerror or e})", str(path)) from e
    return parse_host_lines(text)
