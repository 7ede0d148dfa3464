import enum

# Full-range sentinels for range and window operands.
RANGE_START = 0
RANGE_END = -1

POSITIVE_INFINITY = "+inf"
NEGATIVE_INFINITY = "-inf"


class _Sentinel(enum.Enum):
    sentinel = object()


NOTSET = _Sentinel.sentinel
