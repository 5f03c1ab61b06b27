from .interval import Interval, InvalidIntervalError
from .intervals import Intervals
from .relation import Relation, classify
from .util import DAY, HOUR, MINUTE, SECOND, WEEK

__all__ = [
    "Interval",
    "Intervals",
    "InvalidIntervalError",
    "Relation",
    "classify",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
]
