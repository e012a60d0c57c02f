# Core modules

from .config import Settings, get_settings
from .notifications import Notification, NotificationCenter, NotificationType

__all__ = [
    "Settings",
    "get_settings",
    "Notification",
    "NotificationCenter",
    "NotificationType",
]
