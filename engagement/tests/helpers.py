import uuid

from django.contrib.auth import get_user_model
from django.contrib.messages.storage.fallback import FallbackStorage
from django.contrib.sessions.middleware import SessionMiddleware

from engagement.session import Session, session_from_user
from engagement.targets import EntityKind, Target

User = get_user_model()


def make_user(**kwargs):
    username = kwargs.pop("username", "johndoe")
    email = kwargs.pop("email", f"{username}_{uuid.uuid4().hex[:6]}@example.org")
    password = kwargs.pop("password", "Password123")
    return User.objects.create_user(username=username, email=email, password=password, **kwargs)


def make_target(kind=EntityKind.PROJECT, entity_id=None):
    """creates a target with a fresh uuid unless one is given."""
    return Target.of(kind, entity_id or uuid.uuid4())


def session_for(user) -> Session:
    return session_from_user(user)


def add_session_and_messages(request):
    """Attach session and messages storage to a RequestFactory request."""
    middleware = SessionMiddleware(lambda r: None)
    middleware.process_request(request)
    request.session.save()
    request._messages = FallbackStorage(request)
    return request
