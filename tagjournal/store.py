"""Append-only log store partitioned by calendar month."""

import logging
import os
import threading
from dataclasses import dataclass
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@dataclass(frozen=True)
class AppendResult:
    """Outcome of an append: always accepted, persisted only if the write succeeded."""
    partition: str
    persisted: bool
    error: OSError | None = None


def partition_key(moment: datetime) -> str:
    return f"{moment.year}_{moment.month}"


def format_entry(text: str, moment: datetime) -> str:
    """Render one entry line: ``<unix_ts> <weekday> <day> <month> <year>: <text>``."""
    return (
        f"{int(moment.timestamp())} {WEEKDAYS[moment.weekday()]} "
        f"{moment.day} {moment.month} {moment.year}: {text}\n"
    )


class LogStore:
    def __init__(self, log_dir: str, time_func=None, create: bool = False):
        self._log_dir = log_dir
        self._time_func = time_func or (lambda: datetime.now(timezone.utc))
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()
        if create:
            os.makedirs(log_dir, exist_ok=True)

    @property
    def log_dir(self) -> str:
        return self._log_dir

    def _partition_lock(self, key: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock

    def partition_path(self, key: str) -> str:
        return os.path.join(self._log_dir, key)

    def append(self, text: str, timestamp: datetime | None = None) -> AppendResult:
        """Append one formatted entry to the partition of *timestamp*.

        I/O errors are logged and reported in the result, never raised.
        """
        moment = timestamp or self._time_func()
        key = partition_key(moment)
        line = format_entry(text, moment)
        try:
            with self._partition_lock(key):
                with open(self.partition_path(key), "a", encoding="utf-8") as f:
                    f.write(line)
        except OSError as exc:
            logger.warning("Error when writing to partition %s: %s", key, exc)
            return AppendResult(partition=key, persisted=False, error=exc)
        return AppendResult(partition=key, persisted=True)

    def list_partitions(self) -> list[tuple[str, str]]:
        """Return (key, contents) for every non-empty file in the log directory.

        Raises OSError if the directory cannot be listed or a file cannot be read.
        """
        partitions = []
        with os.scandir(self._log_dir) as entries:
            for entry in entries:
                if not entry.is_file():
                    continue
                with open(entry.path, "r", encoding="utf-8", errors="replace") as f:
                    contents = f.read()
                if contents:
                    partitions.append((entry.name, contents))
        return partitions
