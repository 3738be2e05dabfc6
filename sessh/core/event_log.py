# sessh event log
# JSONL record of resolutions, history changes and launches

import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union


def get_logs_dir() -> Path:
    """Get the logs directory path."""
    from ..constants import LOGS_DIR
    return LOGS_DIR


class EventLogger:
    """
    Append-only JSONL event logger.

    One file per day; every entry is flushed as soon as it is written
    so a crashed ssh session still leaves its launch_start behind.
    """

    def __init__(self, logs_dir: Optional[Union[str, Path]] = None):
        """
        Initialize the event logger.

        Args:
            logs_dir: Directory for log files. Defaults to ~/.config/sessh/logs
        """
        self.logs_dir = Path(logs_dir) if logs_dir is not None else get_logs_dir()
        self.logs_dir.mkdir(parents=True, exist_ok=True)
        date_prefix = datetime.now().strftime("%Y-%m-%d")
        self.log_file = self.logs_dir / f"{date_prefix}.jsonl"
        self._file = open(self.log_file, "a", encoding="utf-8", errors="backslashreplace")
        self._closed = False

    def write(self, event: str, **kwargs) -> None:
        """Write a log entry."""
        if self._closed:
            return

        entry = {
            "ts": datetime.now().isoformat(),
            "event": event,
            **kwargs
        }
        self._file.write(json.dumps(entry, ensure_ascii=False) + "\n")
        self._file.flush()

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._file.close()

    def __enter__(self) -> "EventLogger":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class NullLogger:
    """Logger used when logging is disabled."""

    def write(self, event: str, **kwargs) -> None:
        pass

    def close(self) -> None:
        pass

    def __enter__(self) -> "NullLogger":
        return self

    def __exit__(self, *exc) -> None:
        pass


def open_logger(enabled: bool = True, logs_dir: Optional[Union[str, Path]] = None):
    """
    Return an EventLogger, or a NullLogger when disabled.

    A logs directory that cannot be created or written only costs the
    log: a warning goes to stderr and a NullLogger is returned.
    """
    if not enabled:
        return NullLogger()
    try:
        return EventLogger(logs_dir)
    except OSError as e:
        print(f"Warning: event log disabled ({e.strerror or e})", file=sys.stderr)
        return NullLogger()
