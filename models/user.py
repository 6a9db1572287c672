from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    REGULAR = "regular"
    ADMIN = "admin"


@dataclass(frozen=True)
class User:
    """A student or staff member using the system."""

    user_id: int
    name: str
    contact_details: str
    role: Role = Role.REGULAR

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    def __repr__(self) -> str:
        return f"<User {self.name} ({self.role.value})>"
