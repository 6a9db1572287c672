from models.item import ItemStatus, Record
from models.user import Role, User

__all__ = [
    "Record",
    "ItemStatus",
    "User",
    "Role",
]
