from django.contrib.auth import get_user_model
from firebase_admin import auth
from rest_framework import authentication
from rest_framework import exceptions

from .firebase_admin_client import get_app

User = get_user_model()


class FirebaseAuthentication(authentication.BaseAuthentication):
    """DRF authentication backend for `Authorization: Bearer <Firebase ID token>`."""

    keyword = "Bearer"

    def authenticate(self, request):
        """Return (user, decoded_token), or None when no bearer token is sent."""
        auth_header = request.META.get('HTTP_AUTHORIZATION')
        if not auth_header:
            return None

        parts = auth_header.split()
        if len(parts) != 2 or parts[0] != self.keyword:
            return None

        try:
            get_app()
            decoded_token = auth.verify_id_token(parts[1])
        except Exception:
            raise exceptions.AuthenticationFailed('Invalid Firebase token')

        uid = decoded_token.get("uid")
        try:
            user = User.objects.get(username=uid)
        except User.DoesNotExist:
            raise exceptions.AuthenticationFailed('User not found')
        return (user, decoded_token)

    def authenticate_header(self, request):
        return self.keyword
