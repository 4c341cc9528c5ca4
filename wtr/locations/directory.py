"""Location lookup over the static registry.

Every search is a linear scan of LOCATIONS; that stays fast well past a few
thousand entries.
"""

from collections.abc import Sequence

from wtr.locations.registry import LOCATIONS
from wtr.models.location import Location, SearchMode


def search(
    query: str,
    mode: SearchMode,
    locations: Sequence[Location] = LOCATIONS,
) -> list[Location]:
    """Return matching locations in registry order.

    Name searches are case insensitive (registry names are upper case);
    code searches compare the query verbatim.
    """
    upper = query.upper()
    results = []
    for loc in locations:
        if mode == SearchMode.PARTIAL_NAME:
            matched = upper in loc.name
        elif mode == SearchMode.EXACT_NAME:
            matched = loc.name == upper
        elif mode == SearchMode.EXACT_CODE:
            matched = loc.code == query
        else:
            raise ValueError(f"Unknown search mode: {mode!r}")
        if matched:
            results.append(loc)
    return results


def resolve(
    query: str, locations: Sequence[Location] = LOCATIONS
) -> Location | None:
    """Find a location by code (all digits) or by exact name."""
    mode = SearchMode.EXACT_CODE if is_number(query) else SearchMode.EXACT_NAME
    matches = search(query, mode, locations)
    return matches[0] if matches else None


def is_number(s: str) -> bool:
    return bool(s) and all(c in "0123456789" for c in s)
