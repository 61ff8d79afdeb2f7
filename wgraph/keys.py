"""Vertex key generation."""

from __future__ import annotations

import threading


class KeyGenerator:
    """Thread-safe, monotonically increasing source of vertex keys.

    A graph container that wants its own key space creates a generator and
    passes ``key=generator.next_key()`` when constructing vertices:

        keys = KeyGenerator(start=100)
        v = Vertex(key=keys.next_key())

    Vertices constructed without a key draw from ``default_key_generator``,
    which is shared by the whole process.
    """

    def __init__(self, start: int = 0):
        self._next = start
        self._lock = threading.Lock()

    def next_key(self) -> int:
        """Return the next key and advance the counter."""
        with self._lock:
            key = self._next
            self._next += 1
        return key

    def observe(self, key: int) -> None:
        """Advance past an explicitly assigned key so it is never issued again."""
        with self._lock:
            if key >= self._next:
                self._next = key + 1

    def peek(self) -> int:
        """The key the next call to :meth:`next_key` will return."""
        with self._lock:
            return self._next

    def __repr__(self):
        return f"KeyGenerator(next={self.peek()})"


default_key_generator = KeyGenerator()


def next_default_key() -> int:
    """Draw a key from the process-wide default generator."""
    return default_key_generator.next_key()
