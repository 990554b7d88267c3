from .interactions import InteractionService, InteractionSnapshot, ToggleState
from .notifier import MessagesNotifier, Notice, NoticeKind, Notifier, ToastQueue

__all__ = [
    "InteractionService",
    "InteractionSnapshot",
    "ToggleState",
    "MessagesNotifier",
    "Notice",
    "NoticeKind",
    "Notifier",
    "ToastQueue",
]
