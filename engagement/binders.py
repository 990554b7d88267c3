"""
Optimistic state holder for one like/save widget.

The binder owns what the widget displays. A toggle flips the local state
immediately, asks the InteractionService to persist it, then either adopts
the confirmed server state or restores the exact pre-click values. While a
request is in flight further toggles are ignored, and once the widget is
disposed any late response is dropped.
"""

import logging
from enum import Enum

from engagement.results import ErrorKind, Result
from engagement.targets import Namespace

logger = logging.getLogger(__name__)


class BinderState(Enum):
    IDLE = "idle"
    PENDING = "pending"


_SUCCESS_COPY = {
    (Namespace.LIKE, True): ("Liked", "Thanks for the feedback!"),
    (Namespace.LIKE, False): ("Like removed", "You removed your like."),
    (Namespace.SAVE, True): ("Saved", "Added to your collection."),
    (Namespace.SAVE, False): ("Removed from saved", "Removed from your collection."),
}

_FAILURE_COPY = {
    Namespace.LIKE: ("Error", "Could not update your like."),
    Namespace.SAVE: ("Error", "Could not update saved status."),
}

_VERBS = {
    Namespace.LIKE: "like",
    Namespace.SAVE: "save",
}


class InteractionBinder:
    """Like/save/view state for one target, as shown to one session."""

    def __init__(self, service, target, session, notifier, on_auth_required=None):
        self.service = service
        self.target = target
        self.session = session
        self.notifier = notifier
        self.on_auth_required = on_auth_required

        self.liked = False
        self.saved = False
        self.like_count = 0
        self.view_count = 0
        self.state = BinderState.IDLE
        self.mounted = False
        self.disposed = False

    @property
    def pending(self) -> bool:
        return self.state is BinderState.PENDING

    def mount(self):
        """Load the initial state once. Failed reads leave safe defaults."""
        if self.mounted or self.disposed:
            return
        self.mounted = True
        result = self.service.load_interactions(self.target, self.session)
        if self.disposed or result.value is None:
            return
        snapshot = result.value
        self.liked = snapshot.liked
        self.saved = snapshot.saved
        self.like_count = snapshot.like_count
        self.view_count = snapshot.view_count

    def dispose(self):
        self.disposed = True

    def toggle_like(self):
        return self._toggle(Namespace.LIKE)

    def toggle_save(self):
        return self._toggle(Namespace.SAVE)

    def track_view(self):
        """Record a view; failures are logged by the service, never shown."""
        if self.disposed:
            return None
        result = self.service.record_view(self.target, self.session)
        if not self.disposed and result.ok:
            self.view_count = result.value
        return result

    def as_dict(self):
        return {
            "liked": self.liked,
            "saved": self.saved,
            "like_count": self.like_count,
            "view_count": self.view_count,
            "pending": self.pending,
        }

    def _toggle(self, namespace):
        """
        Run one optimistic toggle. Returns the service Result, an
        AUTH_REQUIRED failure when there is no session, or None when the
        click was ignored.
        """
        if self.disposed:
            return None
        if self.pending:
            logger.debug("Ignoring %s toggle on %s while a request is in flight", namespace.value, self.target)
            return None
        if self.session is None:
            self._prompt_sign_in(namespace)
            return Result.failure(ErrorKind.AUTH_REQUIRED)

        before = (self.liked, self.saved, self.like_count)
        self._apply_optimistic(namespace)
        self.state = BinderState.PENDING
        toggle = self.service.toggle_like if namespace is Namespace.LIKE else self.service.toggle_save
        try:
            result = toggle(self.target, self.session)
        except Exception:
            self._restore(before)
            raise
        finally:
            self.state = BinderState.IDLE

        if self.disposed:
            return result
        if not result.ok:
            self._restore(before)
            if result.error is ErrorKind.AUTH_REQUIRED:
                self._prompt_sign_in(namespace)
            else:
                self.notifier.error(*_FAILURE_COPY[namespace])
            return result

        self._reconcile(namespace, result.value, before)
        self.notifier.success(*_SUCCESS_COPY[(namespace, result.value.active)])
        return result

    def _apply_optimistic(self, namespace):
        if namespace is Namespace.LIKE:
            self.liked = not self.liked
            self.like_count = max(0, self.like_count + (1 if self.liked else -1))
        else:
            self.saved = not self.saved

    def _reconcile(self, namespace, state, before):
        if namespace is Namespace.SAVE:
            self.saved = state.active
            return
        liked_before, _, count_before = before
        self.liked = state.active
        if state.count is not None:
            self.like_count = state.count
        else:
            self.like_count = max(0, count_before + int(state.active) - int(liked_before))

    def _restore(self, before):
        self.liked, self.saved, self.like_count = before

    def _prompt_sign_in(self, namespace):
        if self.on_auth_required is not None:
            self.on_auth_required(self.target, namespace)
            return
        noun = self.target.kind.value.replace("_", " ")
        self.notifier.error("Sign in required", f"Sign in to {_VERBS[namespace]} this {noun}.")
