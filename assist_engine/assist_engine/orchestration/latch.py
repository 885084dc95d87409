"""Single-permit run latch.

Excess acquisition attempts are refused, never queued.  The event loop is
single-threaded, so a plain flag is enough: there is no await between the
check and the set in :meth:`RunLatch.try_acquire`.
"""

from __future__ import annotations


class RunLatch:
    """A one-slot latch guarding query-run submission."""

    def __init__(self) -> None:
        self._held = False
        self._releases = 0

    @property
    def held(self) -> bool:
        return self._held

    @property
    def release_count(self) -> int:
        """Number of times the latch has been released."""
        return self._releases

    def try_acquire(self) -> bool:
        """Take the latch.  Returns False, without waiting, if already held."""
        if self._held:
            return False
        self._held = True
        return True

    def release(self) -> None:
        """Free the latch.

        Raises
        ------
        RuntimeError
            If the latch is not held.
        """
        if not self._held:
            raise RuntimeError("RunLatch.release() called while not held")
        self._held = False
        self._releases += 1
