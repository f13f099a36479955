from __future__ import annotations

from typing import Iterable, Protocol, Sequence, TypeVar

from compendium.utils.logger import get_logger

logger = get_logger(__name__)


class HasId(Protocol):
    @property
    def id(self) -> int: ...


RecordT = TypeVar("RecordT", bound=HasId)


def project(parent_refs: Iterable[int], target_collection: Sequence[RecordT]) -> tuple[RecordT, ...]:
    """Join a reference list against ``target_collection``.

    Results follow the order of ``parent_refs``. Duplicate references repeat the
    record; references with no matching record are skipped.
    """

    by_id: dict[int, RecordT] = {}
    for record in target_collection:
        by_id.setdefault(record.id, record)

    projected: list[RecordT] = []
    for ref in parent_refs:
        record = by_id.get(ref)
        if record is None:
            logger.debug("Skipping dangling reference %s", ref)
            continue
        projected.append(record)
    return tuple(projected)
