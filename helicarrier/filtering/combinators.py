"""
Filter combinators.

Every filter field has three states:

    omitted      -> UNSET  no constraint
    null         -> None   the entity's value must be absent / not applicable
    a value      -> value  the entity's value must match it

The state of a field is read with `requested()`. The combinators below turn
(entity value, requested value) into a bool, and a filter matches when every
field matches.

INVARIANTS:
- UNSET always matches (an empty filter matches everything)
- Combinators never raise
"""

from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel

E = TypeVar("E")
F = TypeVar("F")


class Unset(Enum):
    """Marker for a filter field that was omitted."""

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET = Unset.UNSET


def requested(criteria: BaseModel, field: str) -> Any:
    """
    Read a filter field, keeping omitted and null apart.

    Returns:
        UNSET if the field was not given, otherwise its value (possibly None)
    """
    if field not in criteria.model_fields_set:
        return UNSET
    return getattr(criteria, field)


def matches_scalar(actual: Any, wanted: Any) -> bool:
    """Match by equality. None on either side means absent."""
    if wanted is UNSET:
        return True
    return bool(actual == wanted)


def matches_set(actual: Iterable[Any] | None, wanted: Iterable[Any] | None | Unset) -> bool:
    """
    Match a collection field by overlap.

    A wanted collection matches when it shares at least one element with the
    entity's collection. A null filter matches only an absent collection.
    """
    if wanted is UNSET:
        return True
    if wanted is None or actual is None:
        return wanted is None and actual is None
    return not set(actual).isdisjoint(wanted)


def matches_any(
    entities: Iterable[E] | None,
    filters: Iterable[F] | None | Unset,
    predicate: Callable[[E, F], bool],
) -> bool:
    """
    Match a nested field: some entity must satisfy some sub-filter.

    A null filter matches only an absent collection of entities.
    """
    if filters is UNSET:
        return True
    if filters is None or entities is None:
        return filters is None and entities is None
    filters = list(filters)
    return any(predicate(entity, sub_filter) for entity in entities for sub_filter in filters)
