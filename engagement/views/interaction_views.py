"""HTMX/form endpoints behind the like, save and view widgets."""

from django.contrib.auth.views import redirect_to_login
from django.conf import settings
from django.http import Http404, JsonResponse
from django.shortcuts import redirect
from django.views.decorators.http import require_POST

from engagement.results import ErrorKind
from engagement.services import MessagesNotifier
from engagement.targets import Namespace, supports
from engagement.utils.http import is_ajax
from engagement.views.helpers import binder_for


def _sign_in_response(request):
    """401 JSON for HTMX/fetch callers, otherwise a redirect to the login page."""
    if is_ajax(request):
        return JsonResponse({"error": ErrorKind.AUTH_REQUIRED.value, "login_url": settings.LOGIN_URL}, status=401)
    return redirect_to_login(request.META.get("HTTP_REFERER") or request.get_full_path())


def _toggle(request, kind, entity_id, namespace):
    binder = binder_for(request, kind, entity_id, MessagesNotifier(request))
    toggle = binder.toggle_like if namespace is Namespace.LIKE else binder.toggle_save
    if binder.session is not None:
        binder.mount()
    result = toggle()
    if result.error is ErrorKind.AUTH_REQUIRED:
        return _sign_in_response(request)

    if is_ajax(request):
        return JsonResponse(binder.as_dict(), status=200 if result.ok else 502)
    return redirect(request.META.get("HTTP_REFERER") or "/")


@require_POST
def toggle_like(request, kind, entity_id):
    """Like/unlike a project, snippet or community post."""
    return _toggle(request, kind, entity_id, Namespace.LIKE)


@require_POST
def toggle_save(request, kind, entity_id):
    """Save/unsave a project, snippet or community post."""
    return _toggle(request, kind, entity_id, Namespace.SAVE)


@require_POST
def record_view(request, kind, entity_id):
    """Count a view of a project or snippet. Anonymous views count too."""
    binder = binder_for(request, kind, entity_id, MessagesNotifier(request))
    if not supports(binder.target.kind, Namespace.VIEW):
        raise Http404("Views are not tracked for this kind.")
    result = binder.track_view()
    return JsonResponse({"recorded": result.ok, "view_count": binder.view_count})
