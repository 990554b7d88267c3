"""Transient user-visible notices (toasts)."""

from collections import deque
from dataclasses import dataclass
from enum import Enum

from django.contrib import messages


class NoticeKind(Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notice:
    kind: NoticeKind
    title: str
    message: str


class Notifier:
    """Base notifier; subclasses decide where notices are displayed."""

    def notify(self, kind: NoticeKind, title: str, message: str) -> None:
        raise NotImplementedError

    def success(self, title, message=""):
        self.notify(NoticeKind.SUCCESS, title, message)

    def error(self, title, message=""):
        self.notify(NoticeKind.ERROR, title, message)


class ToastQueue(Notifier):
    """In-memory FIFO of notices, drained by whatever renders them."""

    def __init__(self):
        self._notices = deque()

    def notify(self, kind, title, message):
        self._notices.append(Notice(kind, title, message))

    def drain(self):
        """Return queued notices in arrival order and clear the queue."""
        notices = list(self._notices)
        self._notices.clear()
        return notices

    def __len__(self):
        return len(self._notices)


_MESSAGE_LEVELS = {
    NoticeKind.SUCCESS: messages.SUCCESS,
    NoticeKind.ERROR: messages.ERROR,
}


class MessagesNotifier(Notifier):
    """Push notices into django.contrib.messages; the page layout shows them as toasts."""

    def __init__(self, request):
        self.request = request

    def notify(self, kind, title, message):
        text = f"{title}: {message}" if message else title
        messages.add_message(self.request, _MESSAGE_LEVELS[kind], text, extra_tags=kind.value)
