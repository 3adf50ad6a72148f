"""
Buffer Pool - Reusable scratch buffers for rendering.

Buffers are plain ``io.StringIO`` objects. Each one belongs to exactly one
caller between ``acquire()`` and ``release()``; ``borrow()`` pairs the two so
the buffer goes back on every exit path.
"""

from collections import deque
from contextlib import contextmanager
from typing import Deque, Iterator
import io


class BufferPool:
    """
    Thread-safe pool of text buffers.

    Idle buffers sit in a bounded ``deque``. ``append`` and ``pop`` are
    atomic, and an append to a full deque drops an idle buffer from the
    other end, so the idle count never exceeds ``max_idle``.

    Args:
        max_idle: Maximum number of idle buffers kept for reuse
    """

    def __init__(self, max_idle: int = 64):
        self.max_idle = max_idle
        self._idle: Deque[io.StringIO] = deque(maxlen=max_idle)

    def acquire(self) -> io.StringIO:
        """Get an empty buffer, reusing an idle one when available."""
        try:
            return self._idle.pop()
        except IndexError:
            return io.StringIO()

    def release(self, buffer: io.StringIO) -> None:
        """Clear ``buffer`` and return it to the pool."""
        buffer.seek(0)
        buffer.truncate(0)
        self._idle.append(buffer)

    @contextmanager
    def borrow(self) -> Iterator[io.StringIO]:
        """
        Scoped buffer.

        Example:
            with pool.borrow() as buffer:
                buffer.write("...")
                text = buffer.getvalue()
        """
        buffer = self.acquire()
        try:
            yield buffer
        finally:
            self.release(buffer)

    def __len__(self) -> int:
        """Number of idle buffers."""
        return len(self._idle)
