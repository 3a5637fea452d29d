# core/state.py
from __future__ import annotations

import logging
from dataclasses import dataclass

from PySide6.QtCore import QObject, Signal, Slot

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    "info": logging.INFO,
    "success": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass(frozen=True)
class Notify:
    message: str
    notify_type: str = "info"   # info/success/warn/error


class AppState(QObject):
    notification = Signal(object)   # emits Notify

    def __init__(self):
        super().__init__()
        self.config = None
        self.client = None
        self.playback = None
        self._listening = False
        self.queued_notifications: list[Notify] = []

    def connect_notifications(self, slot) -> None:
        """
        Attach the UI sink and flush anything queued before it existed.
        """
        self.notification.connect(slot)
        self._listening = True
        pending, self.queued_notifications = self.queued_notifications, []
        for n in pending:
            self.notification.emit(n)

    @Slot(str, str)
    def notify(self, message: str, notify_type: str = "info"):
        n = Notify(message=message, notify_type=notify_type)
        logger.log(_LOG_LEVELS.get(notify_type, logging.INFO), "%s", message)
        if not self._listening:
            self.queued_notifications.append(n)
            return
        self.notification.emit(n)
