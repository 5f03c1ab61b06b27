from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, SupportsIndex, overload

from typing_extensions import override

if TYPE_CHECKING:
    from timeutils.interval import Interval


def _canonical_key(interval: "Interval") -> tuple[Any, Any]:
    return interval.instants


class Intervals(list["Interval"]):
    """An ordered sequence of intervals, compared as a multiset.

    No relationship between members is implied: they may overlap, touch,
    repeat or come in any order. Slicing, concatenation and ``copy()`` keep
    the ``Intervals`` type.
    """

    def __init__(self, intervals: "Iterable[Interval]" = ()):
        super().__init__(intervals)

    @override
    def __str__(self) -> str:
        return "[" + ", ".join(str(interval) for interval in self) + "]"

    @overload
    def __getitem__(self, index: SupportsIndex) -> "Interval": ...

    @overload
    def __getitem__(self, index: slice) -> "Intervals": ...

    @override
    def __getitem__(self, index: "SupportsIndex | slice") -> "Interval | Intervals":
        if isinstance(index, slice):
            return Intervals(super().__getitem__(index))
        return super().__getitem__(index)

    @override
    def __add__(self, other: "Iterable[Interval]") -> "Intervals":  # type: ignore[override]
        return Intervals([*self, *other])

    @override
    def copy(self) -> "Intervals":
        return Intervals(self)

    def canonical(self) -> "Intervals":
        """Return a copy sorted by start, then end."""
        return Intervals(sorted(self, key=_canonical_key))

    def equal(self, other: "Iterable[Interval]") -> bool:
        """Compare with ``other`` regardless of order, respecting duplicates.

        Both sides are sorted as copies, so neither operand is reordered.
        A sequence holding anything other than intervals is never equal.
        """
        from timeutils.interval import Interval

        others = Intervals(other)
        if len(self) != len(others):
            return False
        if not all(isinstance(item, Interval) for item in [*self, *others]):
            return False
        return all(
            mine.equal(theirs)
            for mine, theirs in zip(self.canonical(), others.canonical())
        )

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, list):
            return NotImplemented
        return self.equal(other)

    @override
    def __ne__(self, other: object) -> bool:
        if not isinstance(other, list):
            return NotImplemented
        return not self.equal(other)

    __hash__ = None  # type: ignore[assignment]
