from typing import Any, Optional

from sqlmodel import SQLModel


class ContactCreate(SQLModel):
    """Incoming form payload. Only presence is checked; any JSON value is accepted."""

    name: Optional[Any] = None
    phone: Optional[Any] = None

    def is_complete(self) -> bool:
        return bool(self.name) and bool(self.phone)

    def to_contact(self) -> "Contact":
        return Contact(name=str(self.name), phone=str(self.phone))


class Contact(SQLModel):
    name: str
    phone: str


class MessageOut(SQLModel):
    message: str


class HealthOut(SQLModel):
    status: str
    message: str
