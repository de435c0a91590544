"""
Free-slot search and call-time resolution.

Pure functions over absolute instants (naive UTC datetimes). No database,
no HTTP: the routes fetch events and hand them over as Intervals.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from itertools import islice
from typing import Iterable, Iterator, List, Optional, Sequence

import config

logger = logging.getLogger(__name__)


class SchedulingError(Exception):
    """Base class for scheduling errors."""


class InvalidDuration(SchedulingError, ValueError):
    """Raised when a requested call duration is not positive."""


class InvalidInterval(SchedulingError, ValueError):
    """Raised when an interval ends before it starts."""


def to_instant(value: datetime) -> datetime:
    """Normalize a datetime to a naive UTC instant; naive input is taken as UTC already."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


@dataclass(frozen=True)
class Interval:
    """
    Immutable time range between two absolute instants.

    Invariant: start <= end.
    """
    start: datetime
    end: datetime

    def __post_init__(self):
        if self.start > self.end:
            raise InvalidInterval(f"Start {self.start} must not be after end {self.end}")

    @property
    def length(self) -> timedelta:
        return self.end - self.start

    @classmethod
    def from_event(cls, start: datetime, end: datetime) -> "Interval":
        return cls(start=to_instant(start), end=to_instant(end))


def default_window(day: Optional[date] = None) -> Interval:
    """
    Return the fallback search window for ``day`` (today if omitted).

    The opening and closing hours are local wall-clock times of the running
    process, converted to naive UTC so they compare with stored events.
    """
    day = day or date.today()
    start = datetime.combine(day, time(hour=config.CALL_WINDOW_START_HOUR)).astimezone()
    end = datetime.combine(day, time(hour=config.CALL_WINDOW_END_HOUR)).astimezone()
    return Interval(start=to_instant(start), end=to_instant(end))


def _check_duration(duration: timedelta):
    if duration <= timedelta(0):
        raise InvalidDuration(f"Duration must be positive, got {duration}")


def _gaps(events: Iterable[Interval], window: Interval, duration: timedelta) -> Iterator[Interval]:
    cursor = window.start

    for event in sorted(events, key=lambda e: e.start):
        if cursor < event.start and event.start - cursor >= duration:
            yield Interval(start=cursor, end=cursor + duration)
        cursor = max(cursor, event.end)

    if cursor < window.end and window.end - cursor >= duration:
        yield Interval(start=cursor, end=cursor + duration)


def find_free_slots(
    events: Sequence[Interval],
    window: Interval,
    duration: timedelta,
    limit: int = config.MAX_CALL_PROPOSALS
) -> List[Interval]:
    """
    Find free slots of exactly ``duration`` inside ``window``.

    One slot is produced at the start of every gap between busy intervals
    that is long enough, plus one after the last event. Results are in
    ascending order and capped at ``limit``.

    Args:
        events: Busy intervals, in any order. May overlap.
        window: Bounding search range.
        duration: Requested slot length, must be positive.
        limit: Maximum number of slots to return.

    Returns:
        list: Free slots as Intervals.

    Raises:
        InvalidDuration: If ``duration`` is not positive.
    """
    _check_duration(duration)
    return list(islice(_gaps(events, window, duration), limit))


def _overlaps(user_slots: Sequence[Interval], friend_slots: Sequence[Interval], duration: timedelta) -> Iterator[Interval]:
    for user_slot in user_slots:
        for friend_slot in friend_slots:
            overlap_start = max(user_slot.start, friend_slot.start)
            overlap_end = min(user_slot.end, friend_slot.end)
            if overlap_end - overlap_start >= duration:
                yield Interval(start=overlap_start, end=overlap_end)


def resolve_optimal_times(
    user_events: Sequence[Interval],
    friend_events: Sequence[Interval],
    duration: timedelta,
    window: Optional[Interval] = None,
    limit: int = config.MAX_CALL_PROPOSALS
) -> List[Interval]:
    """
    Propose up to ``limit`` call times that are free for both parties.

    A party without any events is treated as busy for the whole window. When
    no shared slot exists, a single fallback proposal at the start of the
    window is returned, so the result is never empty. Callers should treat
    that fallback as low-confidence.

    Args:
        user_events: Busy intervals of the requesting user.
        friend_events: Busy intervals of the friend.
        duration: Requested call length, must be positive.
        window: Search range. Defaults to today's call window.
        limit: Maximum number of proposals.

    Returns:
        list: Call proposals as Intervals, ascending by user slot order.

    Raises:
        InvalidDuration: If ``duration`` is not positive.
    """
    _check_duration(duration)
    window = window or default_window()

    user_events = list(user_events) or [window]
    friend_events = list(friend_events) or [window]

    user_slots = find_free_slots(user_events, window, duration, limit)
    friend_slots = find_free_slots(friend_events, window, duration, limit)

    proposals = list(islice(_overlaps(user_slots, friend_slots, duration), limit))
    if not proposals:
        logger.info("No shared slot in %s - %s, falling back to window start", window.start, window.end)
        proposals = [Interval(start=window.start, end=window.start + duration)]

    return proposals[:limit]
