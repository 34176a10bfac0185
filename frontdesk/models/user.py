"""User model: a front-desk operator account."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """An operator allowed to use the admin UI."""

    id: str
    username: str
    name: str
    role: str = "staff"  # admin, staff
    is_active: bool = True

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r} role={self.role!r}>"
