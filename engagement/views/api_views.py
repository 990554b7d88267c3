from rest_framework import status
from rest_framework.authentication import SessionAuthentication
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from engagement.authentication import FirebaseAuthentication
from engagement.results import ErrorKind
from engagement.serializers import (
    InteractionActionSerializer,
    InteractionStateSerializer,
    NoticeSerializer,
)
from engagement.services import ToastQueue
from engagement.views.helpers import binder_for


@api_view(["GET", "POST"])
@authentication_classes([FirebaseAuthentication, SessionAuthentication])
@permission_classes([AllowAny])
def interactions_api(request, kind, entity_id):
    """
    GET: current like/save/view state for the target.
    POST {"action": "like" | "save"}: toggle and return the confirmed state
    plus the notices the client should toast.
    """
    notices = ToastQueue()
    binder = binder_for(request, kind, entity_id, notices)

    if request.method == "GET":
        binder.mount()
        return Response(InteractionStateSerializer(binder).data)

    action = InteractionActionSerializer(data=request.data)
    action.is_valid(raise_exception=True)

    if binder.session is not None:
        binder.mount()
    if action.validated_data["action"] == "like":
        result = binder.toggle_like()
    else:
        result = binder.toggle_save()

    payload = dict(InteractionStateSerializer(binder).data)
    payload["notices"] = NoticeSerializer(notices.drain(), many=True).data

    if result.error is ErrorKind.AUTH_REQUIRED:
        return Response(payload, status=status.HTTP_401_UNAUTHORIZED)
    if not result.ok:
        return Response(payload, status=status.HTTP_502_BAD_GATEWAY)
    return Response(payload)
