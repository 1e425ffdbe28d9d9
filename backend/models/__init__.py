from .contacts import Contact, ContactCreate, HealthOut, MessageOut

__all__ = ["Contact", "ContactCreate", "HealthOut", "MessageOut"]
