from datetime import date
from enum import Enum

from config import Config


class ItemStatus(str, Enum):
    LOST = "Lost"
    FOUND = "Found"
    RETURNED = "Returned"

    def __str__(self) -> str:
        return self.value


REPORTABLE_STATUSES = (ItemStatus.LOST, ItemStatus.FOUND)


class Record:
    """One lost or found report.

    Everything but ``status`` is fixed at construction. Records are created by
    ``RecordStore.report``, which assigns the id and the reported date.
    """

    __slots__ = ("_id", "_name", "_description", "_location", "_reported_date", "_status")

    def __init__(
        self,
        item_id: int,
        name: str,
        description: str,
        location: str,
        reported_date: date,
        status: ItemStatus,
    ) -> None:
        self._id = item_id
        self._name = name
        self._description = description
        self._location = location
        self._reported_date = reported_date
        self._status = status

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def location(self) -> str:
        return self._location

    @property
    def reported_date(self) -> date:
        return self._reported_date

    @property
    def status(self) -> ItemStatus:
        return self._status

    def mark_returned(self) -> None:
        self._status = ItemStatus.RETURNED

    def __str__(self) -> str:
        return (
            "------------------------------------------\n"
            f"ID: {self._id} | Item: {self._name} | Status: {self._status.value}\n"
            f"Description: {self._description}\n"
            f"Location: {self._location} | "
            f"Date Reported: {self._reported_date.strftime(Config.DATE_FORMAT)}"
        )

    def __repr__(self) -> str:
        return f"<Record {self._id} {self._name!r} {self._status.value}>"
