"""Search and state filtering over an already loaded school list.

These functions never touch the network and never mutate their input. The
filtered view is recomputed from the source list every time either filter
changes.
"""

from collections.abc import Iterable, Sequence

from schooldir.domain.entities.school import School


def matches_search(school: School, search: str) -> bool:
    """Case-insensitive substring match on name, city, state or address."""
    needle = search.strip().lower()
    if not needle:
        return True
    return any(
        needle in value.lower()
        for value in (school.name, school.city, school.state, school.address)
    )


def filter_schools(schools: Sequence[School], search: str = "", state: str = "") -> list[School]:
    """Return the schools matching both the search text and the selected state.

    Args:
        schools: Source list, left untouched.
        search: Free-text search. Blank means no search.
        state: Exact state to keep. Empty means all states.

    Returns:
        A new list in source order.
    """
    return [
        school
        for school in schools
        if matches_search(school, search) and (not state or school.state == state)
    ]


def state_options(schools: Iterable[School]) -> list[str]:
    """Distinct states present in the list, sorted ascending."""
    return sorted({school.state for school in schools})
