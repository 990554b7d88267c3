"""Lazy Firebase Admin app and Firestore client for the relation store."""

import logging
import os
import sys

import firebase_admin
from firebase_admin import credentials, firestore

logger = logging.getLogger(__name__)

_app = None


def _env_truthy(name: str, default: str = "false") -> bool:
    """Return True when env var is set to a truthy value."""
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _is_mock(obj) -> bool:
    """Return True when obj is a unittest.mock object."""
    try:
        return "unittest.mock" in type(obj).__module__
    except Exception:
        return False


def _is_running_tests() -> bool:
    """True under the Django test runner or pytest; Firebase must stay offline then."""
    return any(arg in sys.argv for arg in ("test", "pytest")) or "pytest" in sys.modules


def _should_log() -> bool:
    return not _is_running_tests() or _env_truthy("FIREBASE_VERBOSE_TEST_LOGS")


def _should_skip_app_init() -> bool:
    if not _is_running_tests():
        return False
    if _env_truthy("FIREBASE_ALLOW_TEST_APP"):
        return False
    return not _is_mock(firebase_admin.initialize_app)


def _load_credential():
    cred_path = os.getenv("FIREBASE_SERVICE_ACCOUNT_FILE")
    if not cred_path or not os.path.exists(cred_path):
        if _should_log():
            logger.warning("FIREBASE_SERVICE_ACCOUNT_FILE not found. Firestore relation store disabled.")
        return None
    try:
        return credentials.Certificate(cred_path)
    except (ValueError, OSError) as e:
        if _should_log():
            logger.error("Invalid Firebase service account file %s: %s", cred_path, e)
        return None


def get_app():
    """
    Return the Firebase Admin app, initialising it on first use.
    Returns None when credentials are missing, invalid, or tests forbid it.
    """
    global _app
    if _app:
        return _app
    if firebase_admin._apps:
        _app = firebase_admin.get_app()
        return _app
    if _should_skip_app_init():
        return None

    cred = _load_credential()
    if not cred:
        return None
    try:
        _app = firebase_admin.initialize_app(cred)
    except ValueError as e:
        if _should_log():
            logger.error("Failed to initialize Firebase: %s", e)
        return None
    return _app


def get_firestore_client():
    """Return a Firestore client, or None when Firestore is disabled or unavailable."""
    if not _env_truthy("FIREBASE_ENABLE_FIRESTORE", "true"):
        return None
    if _is_running_tests() and not _env_truthy("FIREBASE_ALLOW_TEST_APP"):
        return None
    app = get_app()
    if not app:
        return None
    return firestore.client(app)
