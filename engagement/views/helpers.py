"""Shared request-to-binder plumbing for the engagement views."""

from django.http import Http404

from engagement.binders import InteractionBinder
from engagement.services import InteractionService
from engagement.session import session_from_request
from engagement.targets import EntityKind, Target


def resolve_target(kind, entity_id):
    """Build a Target from URL parts or raise Http404 for an unknown kind."""
    try:
        return Target.of(EntityKind.from_slug(kind), entity_id)
    except (LookupError, ValueError):
        raise Http404("Unknown interaction target.")


def binder_for(request, kind, entity_id, notifier, service=None):
    """Return an InteractionBinder for the request's user and the URL target."""
    target = resolve_target(kind, entity_id)
    return InteractionBinder(
        service or InteractionService(),
        target,
        session_from_request(request),
        notifier,
    )
