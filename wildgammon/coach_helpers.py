"""Small helpers for generating training data."""

from __future__ import annotations

import sys
import time

from wildgammon.position import OngoingPhase


def positions_file_name(phase: OngoingPhase) -> str:
    """Path of the CSV file holding position IDs for ``phase``."""
    return f"training-data/{phase.name}-positions.csv".lower()


def duration(seconds: int) -> str:
    """Format a number of seconds as ``hh:mm:ss h``."""
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02}:{minutes:02}:{seconds:02} h"


def print_progress(done: int, total: int, start: float) -> None:
    """Print progress and time estimates on the current line.

    ``done`` is the index of the item just finished, ``start`` a value of
    ``time.monotonic()`` taken when the work began.
    """
    if total <= 0:
        raise ValueError("total must be positive")
    progress = (done + 1) / total
    left = 1.0 - progress
    seconds_done = int(time.monotonic() - start)
    seconds_todo = int(seconds_done * (left / progress))
    sys.stdout.write(
        f"\rProgress: {progress * 100.0:2.2f} %. "
        f"Time elapsed: {duration(seconds_done)}. "
        f"Time left: {duration(seconds_todo)}.  "
    )
    sys.stdout.flush()