import re
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_year(value: Any) -> int | None:
    """Parse a year leniently, keeping the leading integer of a string.

    "1995" -> 1995, " 1995abc" -> 1995, "abc" -> None, 1995.7 -> 1995.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value:  # NaN
            return None
        return int(value)

    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def decade_of(value: Any) -> int | None:
    """Bucket a year into its decade: floor(year / 10) * 10. None when unparseable."""
    year = parse_year(value)
    if year is None:
        return None
    return (year // 10) * 10


def decades_of(values: list[str]) -> set[int]:
    """Decades for a list of raw year strings. Unparseable entries match nothing and are dropped."""
    decades = set()
    for value in values:
        decade = decade_of(value)
        if decade is not None:
            decades.add(decade)
    return decades
