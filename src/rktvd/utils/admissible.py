"""Parsing of admissible integer ranges written like "1-2,4,9-23"."""

from __future__ import annotations

from functools import lru_cache


@lru_cache(maxsize=None)
def parse_admissible_range(adm_range: str) -> frozenset:
    """
    Parses a list of admissible integers.

    Parameters
    ----------
    adm_range: str
        Comma separated items, each either a single integer or an inclusive range
        `a-b`. Whitespace is ignored.

    Returns
    -------
    frozenset
        All admissible integers.

    Raises
    ------
    ValueError
        If an item is neither an integer nor a valid range.
    """
    admissible = set()
    for item in "".join(adm_range.split()).split(","):
        if not item:
            raise ValueError(f"Empty item in admissible range '{adm_range}'")
        lower, sep, upper = item.partition("-")
        try:
            if sep:
                first, last = int(lower), int(upper)
            else:
                first = last = int(item)
        except ValueError as error:
            raise ValueError(
                f"Malformed item '{item}' in admissible range '{adm_range}'"
            ) from error
        if first > last:
            raise ValueError(f"Empty range '{item}' in admissible range '{adm_range}'")
        admissible.update(range(first, last + 1))
    return frozenset(admissible)


def is_admissible(n: int, adm_range: str) -> bool:
    """Returns whether `n` is contained in the admissible range `adm_range`."""
    return n in parse_admissible_range(adm_range)
