"""Session keys built from the process id and the wall clock."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass


def digit_sum(number: int) -> int:
    """Return the sum of the decimal digits of a positive number, 0 otherwise."""
    if number <= 0:
        return 0
    return sum(int(digit) for digit in str(number))


@dataclass(frozen=True)
class Key:
    """The key shared by both ciphers: a process id and a time of day."""

    pid: int
    second: int
    minute: int

    @classmethod
    def from_environment(cls) -> Key:
        """Build a key from the current process id and the local time."""
        now = time.localtime()
        return cls(pid=os.getpid(), second=now.tm_sec, minute=now.tm_min)

    def digit_sum(self) -> int:
        """Digit sum of the process id; its parity picks the cipher layout."""
        return digit_sum(self.pid)