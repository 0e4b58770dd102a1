"""Thread-safe in-memory index of every tag seen in the log store."""

import threading

from tagjournal.tags import extract_tags


class TagIndex:
    def __init__(self, tags=None):
        self._tags = set(tags or ())
        self._lock = threading.Lock()

    @classmethod
    def build_from_store(cls, store) -> "TagIndex":
        """Scan every partition of *store*. OSError from the store propagates."""
        tags = set()
        for _key, contents in store.list_partitions():
            tags |= extract_tags(contents)
        return cls(tags)

    def merge(self, text: str) -> set[str]:
        """Add the tags found in *text*. Returns the ones not already indexed."""
        found = extract_tags(text)
        with self._lock:
            new = found - self._tags
            self._tags |= found
        return new

    def snapshot(self) -> list[str]:
        """Sorted copy of the current tags."""
        with self._lock:
            return sorted(self._tags)

    def __len__(self):
        with self._lock:
            return len(self._tags)

    def __contains__(self, tag):
        with self._lock:
            return tag in self._tags
