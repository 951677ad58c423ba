"""Identifier generator implementations."""

import uuid
from collections.abc import Iterable
from itertools import count

from webinar_scheduler.domain.ports.id_generator import IdGenerator


class UuidIdGenerator(IdGenerator):
    """Random UUID4 identifiers for production use."""

    def generate(self) -> str:
        return str(uuid.uuid4())


class FixedIdGenerator(IdGenerator):
    """
    Deterministic identifiers for tests.

    Returns the given ids in order, or "id-1", "id-2", ... when none are given.
    """

    def __init__(self, ids: Iterable[str] | None = None):
        self._ids = iter(ids) if ids is not None else (f"id-{n}" for n in count(1))
        self.generated: list[str] = []

    def generate(self) -> str:
        try:
            new_id = next(self._ids)
        except StopIteration:
            raise RuntimeError("FixedIdGenerator ran out of predetermined ids") from None
        self.generated.append(new_id)
        return new_id
