"""Classification of one interval against another, used to drive subtraction.

The relation is computed once from the boundary comparisons and names how the
subtrahend sits relative to the interval it is removed from:

    interval:            |------------i------------[
    covered:          |-------------other-------------[
    disjoint:                                         |--other--[
    head:                |--other--[
    tail:                                |--other--[
    interior:                 |--other--[
    leading:       |------other------[
    trailing:                             |------other------[
"""

from typing import TYPE_CHECKING, Literal, TypeAlias

if TYPE_CHECKING:
    from timeutils.interval import Interval

Relation: TypeAlias = Literal[
    "covered", "disjoint", "head", "tail", "interior", "leading", "trailing"
]


def classify(interval: "Interval", other: "Interval") -> Relation:
    """Return how ``other`` relates to ``interval`` for subtraction.

    Checks run in priority order: an exact match is also engulfing, so
    ``covered`` must win before the engulfing cases are considered.
    """
    start, end = interval.instants
    other_start, other_end = other.instants

    if other.equal(interval) or other.engulf(interval):
        return "covered"

    if other_end <= start or other_start >= end:
        return "disjoint"

    if interval.engulf(other):
        if other_start == start:
            return "head"
        if other_end == end:
            return "tail"
        return "interior"

    if other_start < start:
        return "leading"
    return "trailing"
