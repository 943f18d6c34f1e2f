"""Signal mask helpers."""

from __future__ import annotations

import signal as _signal


def block(signum: int) -> None:
    """Add ``signum`` to the calling thread's blocked signal set.

    Blocking an already blocked signal does nothing. Raises ValueError for
    an out-of-range signal number and OSError if the system call fails.
    """
    _signal.pthread_sigmask(_signal.SIG_BLOCK, {signum})