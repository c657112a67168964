#Purpose: Coordinate validation at ingress.
#A coordinate travels through the system as the exact text the caller sent:
#"<lat>,<lng>" e.g. "13.388860,52.517037".
#Only the shape and ranges are checked here; the text is never reformatted
#before it reaches OSRM.

import re
from typing import Iterable

Coordinate = str

# lat: 0-89 with optional fraction, or 90 with an all-zero fraction
# lng: 0-179 with optional fraction, or 180 with an all-zero fraction
# sign optional on both, no whitespace, no exponent, ASCII digits only
LAT_LNG_PATTERN = re.compile(
    r"[-+]?([1-8]?\d(\.\d+)?|90(\.0+)?)"
    r","
    r"[-+]?(180(\.0+)?|((1[0-7]\d)|([1-9]?\d))(\.\d+)?)",
    re.ASCII,
)


def is_valid_coordinate(value: Coordinate) -> bool:
    """True when `value` is a well formed "lat,lng" pair inside world bounds."""
    if not isinstance(value, str):
        return False
    return LAT_LNG_PATTERN.fullmatch(value) is not None


def all_valid_coordinates(values: Iterable[Coordinate]) -> bool:
    """
    Every element must pass `is_valid_coordinate`.
    An empty iterable is vacuously valid, presence is checked by the caller.
    """
    return all(is_valid_coordinate(value) for value in values)
