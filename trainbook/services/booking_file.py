"""
Flat text persistence for booking summaries.

Saving writes one booking description per line. Loading only replays the
lines of a file as text; it never rebuilds bookings, trains or passengers.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from .exceptions import BookingFileError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def save_bookings(lines: Iterable[str], destination: PathLike) -> int:
    """
    Write booking descriptions to a file, replacing its contents.

    Args:
        lines: Booking descriptions in booking order
        destination: File to overwrite

    Returns:
        int: Number of lines written

    Raises:
        BookingFileError: If the destination cannot be opened or written
    """
    path = Path(destination)
    count = 0
    try:
        with path.open("w", encoding="utf-8") as handle:
            for line in lines:
                handle.write(f"{line}\n")
                count += 1
    except OSError as e:
        logger.error(f"Error saving bookings to {path}: {e}")
        raise BookingFileError(str(e)) from e

    logger.info(f"Saved {count} bookings to {path}")
    return count


def load_bookings(source: PathLike) -> List[str]:
    """
    Read a booking file back as plain lines.

    Args:
        source: File previously written by save_bookings

    Returns:
        List[str]: File lines in order, without line terminators

    Raises:
        BookingFileError: If the source cannot be opened or read
    """
    path = Path(source)
    try:
        with path.open("r", encoding="utf-8") as handle:
            lines = [line.rstrip("\r\n") for line in handle]
    except OSError as e:
        logger.error(f"Error loading bookings from {path}: {e}")
        raise BookingFileError(str(e)) from e

    logger.info(f"Loaded {len(lines)} lines from {path}")
    return lines
