from unittest.mock import MagicMock

from django.test import SimpleTestCase, TestCase

from engagement.binders import BinderState, InteractionBinder
from engagement.results import ErrorKind, Result
from engagement.services import InteractionService, InteractionSnapshot, NoticeKind, ToastQueue, ToggleState
from engagement.session import Session
from engagement.stores import OrmRelationStore
from engagement.targets import Namespace
from engagement.tests.helpers import make_target, make_user, session_for


def _service(snapshot=None):
    service = MagicMock(spec=InteractionService)
    service.load_interactions.return_value = Result.success(snapshot or InteractionSnapshot())
    return service


class InteractionBinderTests(SimpleTestCase):
    def setUp(self):
        self.target = make_target()
        self.session = Session(user_id="7")
        self.notices = ToastQueue()

    def _binder(self, service, session="default", **kwargs):
        session = self.session if session == "default" else session
        binder = InteractionBinder(service, self.target, session, self.notices, **kwargs)
        binder.mount()
        return binder

    def test_mount_loads_once(self):
        service = _service(InteractionSnapshot(liked=True, saved=False, like_count=4, view_count=9))
        binder = self._binder(service)
        binder.mount()

        service.load_interactions.assert_called_once_with(self.target, self.session)
        self.assertEqual(
            binder.as_dict(),
            {"liked": True, "saved": False, "like_count": 4, "view_count": 9, "pending": False},
        )

    def test_mount_failure_keeps_safe_defaults(self):
        service = MagicMock(spec=InteractionService)
        service.load_interactions.return_value = Result.failure(
            ErrorKind.REMOTE_READ_FAILED, value=InteractionSnapshot()
        )
        binder = self._binder(service)

        self.assertFalse(binder.liked)
        self.assertEqual(binder.like_count, 0)
        self.assertEqual(self.notices.drain(), [])

    def test_like_is_optimistic_then_confirmed(self):
        service = _service(InteractionSnapshot(like_count=5))
        binder = self._binder(service)
        seen = {}

        def confirm(target, session):
            seen.update(liked=binder.liked, like_count=binder.like_count, state=binder.state)
            return Result.success(ToggleState(active=True, count=6))

        service.toggle_like.side_effect = confirm

        result = binder.toggle_like()

        self.assertEqual(seen, {"liked": True, "like_count": 6, "state": BinderState.PENDING})
        self.assertTrue(result.ok)
        self.assertTrue(binder.liked)
        self.assertEqual(binder.like_count, 6)
        self.assertIs(binder.state, BinderState.IDLE)
        self.assertEqual([n.kind for n in self.notices.drain()], [NoticeKind.SUCCESS])

    def test_conflict_reconciles_without_double_count(self):
        service = _service(InteractionSnapshot(like_count=5))
        service.toggle_like.return_value = Result.success(ToggleState(active=True, count=6, conflict=True))
        binder = self._binder(service)

        binder.toggle_like()

        self.assertTrue(binder.liked)
        self.assertEqual(binder.like_count, 6)

    def test_failure_rolls_back_and_shows_error(self):
        service = _service(InteractionSnapshot(like_count=5))
        service.toggle_like.return_value = Result.failure(ErrorKind.REMOTE_WRITE_FAILED)
        binder = self._binder(service)

        result = binder.toggle_like()

        self.assertIs(result.error, ErrorKind.REMOTE_WRITE_FAILED)
        self.assertFalse(binder.liked)
        self.assertEqual(binder.like_count, 5)
        self.assertIs(binder.state, BinderState.IDLE)
        notices = self.notices.drain()
        self.assertEqual(len(notices), 1)
        self.assertIs(notices[0].kind, NoticeKind.ERROR)

    def test_server_state_wins_over_optimistic_guess(self):
        service = _service(InteractionSnapshot(liked=False, like_count=5))
        # another tab already liked; server says the row is gone after our write
        service.toggle_like.return_value = Result.success(ToggleState(active=False, count=4))
        binder = self._binder(service)

        binder.toggle_like()

        self.assertFalse(binder.liked)
        self.assertEqual(binder.like_count, 4)

    def test_missing_server_count_falls_back_to_confirmed_delta(self):
        service = _service(InteractionSnapshot(liked=True, like_count=3))
        service.toggle_like.return_value = Result.success(ToggleState(active=False, count=None))
        binder = self._binder(service)

        binder.toggle_like()

        self.assertFalse(binder.liked)
        self.assertEqual(binder.like_count, 2)

    def test_unauthenticated_toggle_prompts_and_does_not_flip(self):
        service = _service(InteractionSnapshot(like_count=5))
        binder = self._binder(service, session=None)

        result = binder.toggle_like()

        self.assertIs(result.error, ErrorKind.AUTH_REQUIRED)
        service.toggle_like.assert_not_called()
        self.assertFalse(binder.liked)
        self.assertEqual(binder.like_count, 5)
        notices = self.notices.drain()
        self.assertEqual(notices[0].title, "Sign in required")
        self.assertIn("like this project", notices[0].message)

    def test_custom_auth_prompt(self):
        prompt = MagicMock()
        binder = self._binder(_service(), session=None, on_auth_required=prompt)

        binder.toggle_save()

        prompt.assert_called_once_with(self.target, Namespace.SAVE)
        self.assertEqual(self.notices.drain(), [])

    def test_second_click_while_pending_is_ignored(self):
        service = _service(InteractionSnapshot(like_count=5))
        binder = self._binder(service)
        inner = []

        def slow_toggle(target, session):
            inner.append(binder.toggle_like())
            return Result.success(ToggleState(active=True, count=6))

        service.toggle_like.side_effect = slow_toggle

        binder.toggle_like()

        self.assertEqual(inner, [None])
        service.toggle_like.assert_called_once()
        self.assertTrue(binder.liked)
        self.assertEqual(binder.like_count, 6)

    def test_response_after_dispose_is_discarded(self):
        service = _service(InteractionSnapshot(like_count=5))
        binder = self._binder(service)

        def unmount_then_fail(target, session):
            binder.dispose()
            return Result.failure(ErrorKind.REMOTE_WRITE_FAILED)

        service.toggle_like.side_effect = unmount_then_fail

        binder.toggle_like()

        self.assertEqual(self.notices.drain(), [])
        # optimistic values are left as they were at dispose time
        self.assertTrue(binder.liked)
        self.assertIsNone(binder.toggle_like())

    def test_save_toggle_never_changes_likes(self):
        service = _service(InteractionSnapshot(liked=True, like_count=5))
        service.toggle_save.return_value = Result.success(ToggleState(active=True, count=1))
        binder = self._binder(service)

        binder.toggle_save()

        self.assertTrue(binder.saved)
        self.assertTrue(binder.liked)
        self.assertEqual(binder.like_count, 5)

    def test_unexpected_exception_restores_state(self):
        service = _service(InteractionSnapshot(like_count=5))
        service.toggle_like.side_effect = RuntimeError("boom")
        binder = self._binder(service)

        with self.assertRaises(RuntimeError):
            binder.toggle_like()

        self.assertFalse(binder.liked)
        self.assertEqual(binder.like_count, 5)
        self.assertIs(binder.state, BinderState.IDLE)

    def test_track_view_updates_count(self):
        service = _service()
        service.record_view.return_value = Result.success(12)
        binder = self._binder(service)

        binder.track_view()

        self.assertEqual(binder.view_count, 12)


class InteractionBinderIntegrationTests(TestCase):
    """Binder against the real ORM store."""

    def setUp(self):
        self.service = InteractionService(OrmRelationStore())
        self.target = make_target()
        self.notices = ToastQueue()

    def test_like_then_unlike_round_trip(self):
        user = make_user()
        others = [make_user(username=f"fan{i}") for i in range(5)]
        for other in others:
            self.service.toggle_like(self.target, session_for(other))

        binder = InteractionBinder(self.service, self.target, session_for(user), self.notices)
        binder.mount()
        self.assertEqual((binder.liked, binder.like_count), (False, 5))

        binder.toggle_like()
        self.assertEqual((binder.liked, binder.like_count), (True, 6))

        binder.toggle_like()
        self.assertEqual((binder.liked, binder.like_count), (False, 5))

        fresh = InteractionBinder(self.service, self.target, session_for(user), self.notices)
        fresh.mount()
        self.assertEqual((fresh.liked, fresh.like_count), (False, 5))
