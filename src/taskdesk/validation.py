"""Validation of raw task input.

A task needs non-empty text and a scheduled time in one of two clock formats:

- 12-hour with a marker, ``h:mm AM`` / ``h:mm PM`` (hour 1-12, leading zero optional)
- 24-hour, ``HH:mm`` (hour 00-23, zero-padded)

The format is picked by whether the uppercased time contains an ``M``. Parsing is
strict: the whole string must match and out-of-range fields are rejected rather
than rolled over, so ``25:00`` and ``13:65`` both fail.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import time
from typing import Literal

from taskdesk.errors import EmptyFieldError, InvalidTimeError

TimeFormat = Literal["12h", "24h"]

TWELVE_HOUR_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{2}) (AM|PM)")
TWENTY_FOUR_HOUR_PATTERN = re.compile(r"([0-9]{2}):([0-9]{2})")


@dataclass(frozen=True)
class ValidEntry:
    """Task text and scheduled time that passed validation."""

    text: str
    time: str


def time_format(value: str) -> TimeFormat:
    """Return which clock format a time string is parsed with.

    Any ``M`` selects the 12-hour format, so a stray ``M`` as in ``6:30M``
    sends the value down the 12-hour path where it then fails.
    """
    return "12h" if "M" in value.upper() else "24h"


def parse_time(value: str) -> time:
    """Strictly parse a time string into a clock value.

    Args:
        value: Time text, already trimmed. Case is ignored.

    Returns:
        The parsed time of day.

    Raises:
        InvalidTimeError: If the value matches neither format or a field is out of range.
    """
    normalised = value.upper()

    if time_format(normalised) == "12h":
        match = TWELVE_HOUR_PATTERN.fullmatch(normalised)
        if match is None:
            raise InvalidTimeError(value)
        hour, minute, marker = int(match.group(1)), int(match.group(2)), match.group(3)
        if not 1 <= hour <= 12 or minute > 59:
            raise InvalidTimeError(value)
        hour = hour % 12 + (12 if marker == "PM" else 0)
        return time(hour, minute)

    match = TWENTY_FOUR_HOUR_PATTERN.fullmatch(normalised)
    if match is None:
        raise InvalidTimeError(value)
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidTimeError(value)
    return time(hour, minute)


def validate_entry(raw_text: str, raw_time: str) -> ValidEntry:
    """Validate raw task text and time text.

    Args:
        raw_text: Task description as typed.
        raw_time: Scheduled time as typed.

    Returns:
        The trimmed text and the trimmed, uppercased time.

    Raises:
        EmptyFieldError: If either field is blank after trimming.
        InvalidTimeError: If the time fails strict parsing.
    """
    text = raw_text.strip()
    time_text = raw_time.strip().upper()

    empty = [name for name, value in (("task", text), ("time", time_text)) if not value]
    if empty:
        raise EmptyFieldError(empty)

    parse_time(time_text)
    return ValidEntry(text=text, time=time_text)
