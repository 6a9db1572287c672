import logging
from datetime import date
from itertools import count
from typing import Callable, List, NamedTuple, Optional, Union

from models import ItemStatus, Record
from models.item import REPORTABLE_STATUSES

logger = logging.getLogger(__name__)


class Match(NamedTuple):
    lost: Record
    found: Record


def _same_name(left: str, right: str) -> bool:
    # Per-character comparison; full case folding would equate "ß" with "ss".
    return len(left) == len(right) and all(
        a == b or a.upper() == b.upper() or a.lower() == b.lower()
        for a, b in zip(left, right)
    )


def _coerce_status(status: Union[ItemStatus, str]) -> ItemStatus:
    if isinstance(status, str) and not isinstance(status, ItemStatus):
        lookup = {member.value.casefold(): member for member in ItemStatus}
        status = lookup.get(status.casefold())
    if status not in REPORTABLE_STATUSES:
        raise ValueError("Items can only be reported as Lost or Found")
    return status


class RecordStore:
    """In-memory owner of every reported item.

    Records are kept in insertion order, which is also the listing order.
    Each store numbers its records independently, starting at 1.
    """

    def __init__(self, clock: Callable[[], date] = date.today) -> None:
        self._clock = clock
        self._items: List[Record] = []
        self._ids = count(1)

    def __len__(self) -> int:
        return len(self._items)

    def report(
        self,
        name: str,
        description: str,
        location: str,
        status: Union[ItemStatus, str],
    ) -> Record:
        record = Record(
            item_id=next(self._ids),
            name=name,
            description=description,
            location=location,
            reported_date=self._clock(),
            status=_coerce_status(status),
        )
        self._items.append(record)
        logger.info("Reported %s item %d: %r", record.status.value, record.id, record.name)
        return record

    def list_all(self) -> List[Record]:
        return list(self._items)

    def get(self, item_id: int) -> Optional[Record]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def search_by_name(self, query: str) -> List[Record]:
        return [item for item in self._items if _same_name(item.name, query)]

    def find_potential_matches(self) -> List[Match]:
        """Pair every Lost record with every Found record of the same name.

        This is a plain cross product: a record may appear in several pairs
        and nothing is consumed by being matched. Returned records take part
        on neither side.
        """
        matches = [
            Match(lost_item, found_item)
            for lost_item in self._items
            if lost_item.status is ItemStatus.LOST
            for found_item in self._items
            if found_item.status is ItemStatus.FOUND
            and _same_name(lost_item.name, found_item.name)
        ]
        logger.debug("Match run over %d items produced %d pairs", len(self._items), len(matches))
        return matches

    def mark_returned(self, item_id: int) -> Optional[Record]:
        """Set the item's status to Returned.

        Returns the updated record, or None when no item has that id.
        """
        item = self.get(item_id)
        if item is None:
            logger.info("Cannot mark item %d as returned: no such item", item_id)
            return None
        item.mark_returned()
        logger.info("Item %d marked as returned", item_id)
        return item
