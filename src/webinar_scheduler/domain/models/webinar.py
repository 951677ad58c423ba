"""
Webinar Model
=============

Aggregate root for webinar scheduling and capacity.

The entity trusts its inputs: business rules (seat ceiling, lead time,
ownership) are checked by the use cases before any mutation.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

MAX_TITLE_LENGTH = 255


@dataclass(frozen=True)
class WebinarProps:
    """Immutable snapshot of a webinar's state."""

    id: str
    organizer_id: str
    title: str
    start_date: datetime
    end_date: datetime
    seats: int
    # Storage revision this snapshot was read at, bumped by repository updates
    version: int = field(default=0, compare=False)


class Webinar:
    """
    Webinar aggregate.

    State lives in a single immutable WebinarProps record. update() builds a
    new record and swaps it in with one assignment, so readers observe either
    the old state or the new one.
    """

    def __init__(self, props: WebinarProps | None = None, **fields: Any) -> None:
        if props is None:
            props = WebinarProps(**fields)
        elif fields:
            raise TypeError("Pass either props or keyword fields, not both")
        self._props = props

    @property
    def props(self) -> WebinarProps:
        return self._props

    @property
    def id(self) -> str:
        return self._props.id

    @property
    def organizer_id(self) -> str:
        return self._props.organizer_id

    @property
    def title(self) -> str:
        return self._props.title

    @property
    def start_date(self) -> datetime:
        return self._props.start_date

    @property
    def end_date(self) -> datetime:
        return self._props.end_date

    @property
    def seats(self) -> int:
        return self._props.seats

    @property
    def version(self) -> int:
        return self._props.version

    def update(
        self,
        *,
        title: str | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        seats: int | None = None,
    ) -> None:
        """
        Replace any subset of the mutable fields.

        id and organizer_id are fixed at creation and cannot be updated.

        Args:
            title: New title
            start_date: New start timestamp
            end_date: New end timestamp
            seats: New seat capacity
        """
        changes: dict[str, Any] = {
            name: value
            for name, value in (
                ("title", title),
                ("start_date", start_date),
                ("end_date", end_date),
                ("seats", seats),
            )
            if value is not None
        }
        if changes:
            self._props = replace(self._props, **changes)

    def is_organized_by(self, user_id: str) -> bool:
        """Check whether the given user owns this webinar."""
        return self._props.organizer_id == user_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Webinar):
            return NotImplemented
        return self._props == other._props

    def __repr__(self) -> str:
        return f"Webinar({self._props!r})"
