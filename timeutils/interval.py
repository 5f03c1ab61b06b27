import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from dateutil.parser import isoparse
from typing_extensions import override

from timeutils.intervals import Intervals
from timeutils.relation import classify
from timeutils.util import format_rfc3339, to_instant

logger = logging.getLogger(__name__)


class InvalidIntervalError(ValueError):
    """Raised when an interval's start is after its end."""

    def __init__(self, start: datetime, end: datetime):
        super().__init__(
            f"Interval start ({format_rfc3339(start)}) must be <= end "
            f"({format_rfc3339(end)}).\n"
            f"Hint: swap the bounds, or use Interval.try_new() to get None "
            f"instead of an error."
        )
        self.start: datetime = start
        self.end: datetime = end


@dataclass(frozen=True, kw_only=True, eq=False)
class Interval:
    """A half-open span of time: ``start`` is included, ``end`` is excluded.

          |----------i----------[
        start                  end

    ``i.include(start)`` is True, ``i.include(end)`` is False. A zero-length
    interval (``start == end``) is valid and includes no instant.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        for edge, bound in (("start", self.start), ("end", self.end)):
            if not isinstance(bound, datetime):
                raise TypeError(
                    f"Interval {edge} must be a datetime.\n"
                    f"Got {type(bound).__name__!r}: {bound!r}"
                )
        if (self.start.utcoffset() is None) != (self.end.utcoffset() is None):
            raise TypeError(
                f"Interval bounds must both be timezone-aware or both be naive.\n"
                f"Got start={self.start!r}, end={self.end!r}\n"
                f"Hint: attach the same tzinfo to both, e.g. tzinfo=timezone.utc"
            )
        if to_instant(self.start) > to_instant(self.end):
            raise InvalidIntervalError(self.start, self.end)

    @classmethod
    def try_new(cls, start: datetime, end: datetime) -> "Interval | None":
        """Build an interval, returning None instead of raising when start > end."""
        try:
            return cls(start=start, end=end)
        except InvalidIntervalError as exc:
            logger.debug("Rejected interval: %s", exc)
            return None

    @classmethod
    def parse(cls, start: str, end: str) -> "Interval":
        """Build an interval from two ISO 8601 / RFC 3339 timestamps."""
        return cls(start=isoparse(start), end=isoparse(end))

    @classmethod
    def of(cls, start: datetime, duration: timedelta) -> "Interval":
        """Build ``[start, start + duration)``."""
        return cls(start=start, end=start + duration)

    @override
    def __str__(self) -> str:
        return (
            f"Interval{{start: {format_rfc3339(self.start)}, "
            f"end: {format_rfc3339(self.end)}, duration: {self.duration}}}"
        )

    @property
    def instants(self) -> tuple[datetime, datetime]:
        """Bounds as chronologically comparable values (UTC when aware).

        All predicates compare these rather than the stored bounds, so two
        wall-clock times on either side of a DST fold still order by instant.
        """
        return to_instant(self.start), to_instant(self.end)

    @property
    def duration(self) -> timedelta:
        start, end = self.instants
        return end - start

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.equal(other)

    @override
    def __hash__(self) -> int:
        return hash(self.instants)

    def include(self, instant: datetime) -> bool:
        """Test whether ``instant`` is within the interval.

        interval:      |------------i------------[
        instant:            |

        An instant equal to ``end`` is not included.
        """
        start, end = self.instants
        return start <= to_instant(instant) < end

    def __contains__(self, instant: datetime) -> bool:
        return self.include(instant)

    def equal(self, other: "Interval") -> bool:
        """Test that ``other`` has the same boundaries.

        interval:      |------------i------------[
        other:         |----------other----------[
        """
        return self.instants == other.instants

    def engulf(self, other: "Interval") -> bool:
        """Test that ``other`` lies within the interval, equal bounds allowed.

        interval:      |------------i------------[
        other:              |---other---[
        """
        start, end = self.instants
        other_start, other_end = other.instants
        return start <= other_start and end >= other_end

    def overlap(self, other: "Interval") -> bool:
        """Test whether ``other`` shares any span with the interval.

        Sharing opposite boundaries is not enough to overlap.

        interval:      |------------i------------[
        other:                          |----other---[
        other:    |----other----[
        other:             |---other---[
        other:      |-------------other-------------[
        """
        start, end = self.instants
        other_start, other_end = other.instants
        return not (other_end <= start or other_start >= end)

    def contiguous(self, other: "Interval") -> bool:
        """Test whether ``other`` touches the interval on exactly one side.

        interval:           |----------i----------[
        other:                                    |--other--[
        other:    |--other--[
        """
        start, end = self.instants
        other_start, other_end = other.instants
        return end == other_start or start == other_end

    def sub(self, other: "Interval") -> Intervals:
        """Remove ``other`` from the interval, leaving zero, one or two pieces.

        interval:      |------------i------------[
        other:                    |------other------[
        result:        |----i'----[
        other:                 |--other--[
        result:        |--i'---[         |--i"---[
        """
        relation = classify(self, other)

        if relation == "covered":
            return Intervals()
        if relation == "disjoint":
            return Intervals([self])
        if relation in ("head", "leading"):
            return Intervals([Interval(start=other.end, end=self.end)])
        if relation in ("tail", "trailing"):
            return Intervals([Interval(start=self.start, end=other.start)])
        # interior
        return Intervals(
            [
                Interval(start=self.start, end=other.start),
                Interval(start=other.end, end=self.end),
            ]
        )

    def __sub__(self, other: "Interval") -> Intervals:
        return self.sub(other)
