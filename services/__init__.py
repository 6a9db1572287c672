from services.record_store import Match, RecordStore

__all__ = [
    "RecordStore",
    "Match",
]
