"""In-process call tally backing the status summary."""

import threading
from enum import Enum
from typing import Dict


class CallDirection(str, Enum):
    """Which side of a probe this process was on."""
    RECEIVED = "received"
    MADE = "made"


class CallType(str, Enum):
    """Kind of probe operation."""
    PING = "ping"
    CHECK = "check"
    CHECK_ALL = "check_all"


class CallTally:
    """
    Counts calls per direction and call type.

    Every (direction, call type) pair is created at zero up front, so
    lookups never miss. Counters only go up; a fresh tally is the only
    way back to zero.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._counts: Dict[CallDirection, Dict[CallType, int]] = {
            direction: {call_type: 0 for call_type in CallType}
            for direction in CallDirection
        }

    def increment(self, direction: CallDirection, call_type: CallType) -> int:
        """Add one to the counter and return its new value."""
        direction = CallDirection(direction)
        call_type = CallType(call_type)
        with self._lock:
            self._counts[direction][call_type] += 1
            return self._counts[direction][call_type]

    def get(self, direction: CallDirection, call_type: CallType) -> int:
        """Current value of a single counter."""
        direction = CallDirection(direction)
        call_type = CallType(call_type)
        with self._lock:
            return self._counts[direction][call_type]

    def snapshot(self) -> Dict[str, Dict[str, int]]:
        """Copy of every counter, keyed by plain strings."""
        with self._lock:
            return {
                direction.value: {
                    call_type.value: count
                    for call_type, count in calls.items()
                }
                for direction, calls in self._counts.items()
            }
