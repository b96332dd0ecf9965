"""Router modules exposed for convenient imports."""

from . import auth, bookings, chat, dashboard, equipment, healthz, preferences

__all__ = [
    "auth",
    "bookings",
    "chat",
    "dashboard",
    "equipment",
    "healthz",
    "preferences",
]
